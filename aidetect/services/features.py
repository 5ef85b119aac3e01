from __future__ import annotations

from dataclasses import dataclass

from aidetect.services.constants import FORMAL_CONNECTORS, PERSONAL_MARKERS
from aidetect.utils.text import contains_any, sentences, words


@dataclass(frozen=True)
class Features:
    word_count: int
    sentence_count: int
    avg_words_per_sentence: float
    vocabulary_diversity: float
    has_formal_connectors: bool
    has_personal_markers: bool


def extract_features(content: str) -> Features:
    toks = words(content)
    sent = sentences(content)

    wc = len(toks)
    sc = len(sent)
    unique = len({token.casefold() for token in toks})

    return Features(
        word_count=wc,
        sentence_count=sc,
        avg_words_per_sentence=wc / max(1, sc),
        vocabulary_diversity=unique / wc if wc else 0.0,
        has_formal_connectors=contains_any(content, FORMAL_CONNECTORS),
        has_personal_markers=contains_any(content, PERSONAL_MARKERS),
    )
