from __future__ import annotations

from dataclasses import dataclass

from aidetect.schemas.common import ContentKind
from aidetect.services.constants import DEFAULT_WEIGHTS, HINT_SCORE_BOUNDS, PROBABILITY_BOUNDS, ScoringWeights
from aidetect.services.features import Features
from aidetect.utils.random_source import RandomSource
from aidetect.utils.text import clamp


@dataclass(frozen=True)
class ContentHints:
    has_personal_pronouns: bool = False
    has_emotional_language: bool = False
    has_typos: bool = False
    is_very_formal: bool = False
    is_very_long: bool = False


def synthesize(
    kind: ContentKind,
    features: Features | None,
    rng: RandomSource,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> tuple[float, float]:
    """Fold features into ``(ai_probability, confidence)``.

    Images skip the features entirely and draw both values from fixed ranges.
    For text and documents every adjustment lands on one accumulator that is
    clamped once, after the last step.
    """
    if kind is ContentKind.IMAGE:
        return rng.uniform(*weights.image_probability), rng.uniform(*weights.image_confidence)

    if features is None:
        raise ValueError(f"features are required for {kind.value} content")

    base = rng.uniform(*weights.base_range)

    if features.has_formal_connectors:
        base += weights.formal_connector_boost

    if features.avg_words_per_sentence > weights.long_sentence_words:
        base += weights.long_sentence_boost

    if features.has_personal_markers:
        base -= weights.personal_marker_penalty

    if features.word_count < weights.short_text_words:
        base -= weights.short_text_penalty
        confidence = rng.uniform(*weights.short_text_confidence)
    else:
        confidence = rng.uniform(*weights.long_text_confidence)

    if features.vocabulary_diversity < weights.low_diversity_ratio:
        base += weights.low_diversity_boost

    return clamp(base, *PROBABILITY_BOUNDS), confidence


def score_from_hints(hints: ContentHints, rng: RandomSource) -> float:
    score = 30 + rng.random() * 40

    if hints.has_personal_pronouns:
        score -= 15
    if hints.has_emotional_language:
        score -= 10
    if hints.has_typos:
        score -= 20
    if hints.is_very_formal:
        score += 15
    if hints.is_very_long:
        score += 10

    return clamp(score, *HINT_SCORE_BOUNDS)
