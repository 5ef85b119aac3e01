from __future__ import annotations

from aidetect.schemas.common import ContentKind
from aidetect.services.constants import (
    DEFAULT_PATTERN_THRESHOLDS,
    DEFAULT_RECOMMENDATION_THRESHOLDS,
    PatternCountThresholds,
    RecommendationThresholds,
)
from aidetect.utils.random_source import RandomSource, shuffled

_TEXT_PATTERNS = (
    "Repetitive sentence structure patterns",
    "Formal tone consistency throughout",
    "Limited vocabulary variation detected",
    "Predictable transition word usage",
    "Uniform paragraph length distribution",
    "Consistent punctuation patterns",
    "Lack of colloquial expressions",
    "Systematic argument structure",
    "Balanced sentence complexity",
    "Minimal stylistic inconsistencies",
)

_IMAGE_PATTERNS = (
    "Pixel-level inconsistencies detected",
    "Unnatural lighting gradients",
    "Compression artifact anomalies",
    "Frequency domain irregularities",
    "Metadata signature analysis",
    "Color distribution patterns",
    "Edge detection anomalies",
)

_TEXT_INDICATORS = (
    "Transformer-based language model analysis",
    "Syntactic pattern recognition",
    "Semantic coherence evaluation",
    "Writing style fingerprinting",
    "N-gram frequency analysis",
    "Perplexity score calculation",
    "Linguistic feature extraction",
    "Stylometric analysis",
)

_IMAGE_INDICATORS = (
    "Deep convolutional neural network analysis",
    "Generative adversarial network detection",
    "Pixel-level statistical analysis",
    "Metadata forensic examination",
    "Frequency domain transformation",
    "Compression pattern analysis",
)

PATTERNS: dict[ContentKind, tuple[str, ...]] = {
    ContentKind.TEXT: _TEXT_PATTERNS,
    ContentKind.DOCUMENT: _TEXT_PATTERNS,
    ContentKind.IMAGE: _IMAGE_PATTERNS,
}

INDICATORS: dict[ContentKind, tuple[str, ...]] = {
    ContentKind.TEXT: _TEXT_INDICATORS,
    ContentKind.DOCUMENT: _TEXT_INDICATORS,
    ContentKind.IMAGE: _IMAGE_INDICATORS,
}

INDICATOR_COUNTS: dict[ContentKind, int] = {
    ContentKind.TEXT: 4,
    ContentKind.DOCUMENT: 4,
    ContentKind.IMAGE: 3,
}

ALGORITHMS: dict[ContentKind, str] = {
    ContentKind.TEXT: "Neural Pattern Recognition (NPR)",
    ContentKind.DOCUMENT: "Document Analysis Framework (DAF)",
    ContentKind.IMAGE: "Visual Content Detection (VCD)",
}

HIGH_RECOMMENDATION = (
    "High likelihood of AI generation. Content exhibits strong patterns consistent with machine-generated text/media."
)
MODERATE_RECOMMENDATION = (
    "Moderate likelihood of AI generation. Some patterns suggest possible machine assistance in content creation."
)
LOW_MODERATE_RECOMMENDATION = (
    "Low to moderate likelihood of AI generation. Content shows mixed indicators requiring further analysis."
)
LOW_RECOMMENDATION = (
    "Low likelihood of AI generation. Content exhibits characteristics typical of human-created material."
)


def _pattern_count(
    kind: ContentKind,
    ai_probability: float,
    rng: RandomSource,
    thresholds: PatternCountThresholds,
) -> int:
    if kind is ContentKind.IMAGE:
        return 3 + int(rng.random() * 2)
    if ai_probability > thresholds.four_above:
        return 4
    if ai_probability > thresholds.three_above:
        return 3
    return 2


def select_patterns(
    kind: ContentKind,
    ai_probability: float,
    rng: RandomSource,
    thresholds: PatternCountThresholds = DEFAULT_PATTERN_THRESHOLDS,
) -> list[str]:
    # The image count is drawn after the shuffle.
    ordered = shuffled(PATTERNS[kind], rng)
    return ordered[: _pattern_count(kind, ai_probability, rng, thresholds)]


def select_indicators(kind: ContentKind, rng: RandomSource) -> list[str]:
    return shuffled(INDICATORS[kind], rng)[: INDICATOR_COUNTS[kind]]


def recommend(
    ai_probability: float,
    thresholds: RecommendationThresholds = DEFAULT_RECOMMENDATION_THRESHOLDS,
) -> str:
    if ai_probability > thresholds.high:
        return HIGH_RECOMMENDATION
    if ai_probability > thresholds.moderate:
        return MODERATE_RECOMMENDATION
    if ai_probability > thresholds.low_moderate:
        return LOW_MODERATE_RECOMMENDATION
    return LOW_RECOMMENDATION


def algorithm_for(kind: ContentKind) -> str:
    return ALGORITHMS[kind]
