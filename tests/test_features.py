import pytest

from aidetect.services.features import extract_features


def test_extract_features_non_empty():
    text = "This is a short sentence. This is another one with a bit more variety!"
    features = extract_features(text)

    assert features.word_count == 14
    assert features.sentence_count == 2
    assert features.avg_words_per_sentence == pytest.approx(7.0)
    assert 0.0 < features.vocabulary_diversity <= 1.0
    assert not features.has_formal_connectors
    assert not features.has_personal_markers


def test_extract_features_empty_safe():
    features = extract_features("")

    assert features.word_count == 0
    assert features.sentence_count == 0
    assert features.avg_words_per_sentence == 0.0
    assert features.vocabulary_diversity == 0.0


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("one", 1),
        ("  leading and trailing  ", 3),
        ("tabs\tand\nnewlines\r\nmix", 4),
        ("...", 1),
        ("   \n\t ", 0),
    ],
)
def test_word_count_counts_whitespace_delimited_tokens(text, expected):
    assert extract_features(text).word_count == expected


def test_sentence_count_ignores_punctuation_runs_and_blank_segments():
    features = extract_features("Wait... what?! Really.   ")

    assert features.sentence_count == 3


def test_sentence_count_zero_for_punctuation_only():
    features = extract_features("?!. ...")

    assert features.sentence_count == 0
    assert features.word_count == 2


def test_vocabulary_diversity_is_case_folded():
    features = extract_features("Echo echo ECHO eChO")

    assert features.vocabulary_diversity == pytest.approx(0.25)


def test_vocabulary_diversity_is_one_for_distinct_words():
    assert extract_features("alpha beta gamma delta").vocabulary_diversity == 1.0


@pytest.mark.parametrize("connector", ["Furthermore", "Moreover", "Additionally"])
def test_formal_connectors_detected(connector):
    assert extract_features(f"{connector}, the result holds.").has_formal_connectors


def test_formal_connectors_are_case_sensitive():
    assert not extract_features("furthermore, moreover, additionally").has_formal_connectors


@pytest.mark.parametrize("marker", ["I believe", "In my opinion", "personally"])
def test_personal_markers_detected(marker):
    assert extract_features(f"Well, {marker} this is fine.").has_personal_markers


def test_personal_markers_are_case_sensitive():
    assert not extract_features("i believe in my opinion Personally").has_personal_markers


def test_markers_match_as_substrings():
    features = extract_features("Impersonally written, yet Moreover-ish.")

    assert features.has_personal_markers
    assert features.has_formal_connectors
