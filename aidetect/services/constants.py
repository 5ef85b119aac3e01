from __future__ import annotations

from dataclasses import dataclass

FORMAL_CONNECTORS = ("Furthermore", "Moreover", "Additionally")
PERSONAL_MARKERS = ("I believe", "In my opinion", "personally")


@dataclass(frozen=True)
class ScoringWeights:
    # Tuning constants without statistical calibration.
    formal_connector_boost: float = 15.0
    long_sentence_boost: float = 10.0
    long_sentence_words: float = 20.0
    personal_marker_penalty: float = 15.0
    short_text_penalty: float = 10.0
    short_text_words: int = 50
    low_diversity_boost: float = 12.0
    low_diversity_ratio: float = 0.6

    base_range: tuple[float, float] = (0.0, 100.0)
    short_text_confidence: tuple[float, float] = (60.0, 85.0)
    long_text_confidence: tuple[float, float] = (80.0, 95.0)
    image_probability: tuple[float, float] = (20.0, 80.0)
    image_confidence: tuple[float, float] = (75.0, 95.0)


@dataclass(frozen=True)
class RecommendationThresholds:
    high: float = 75.0
    moderate: float = 50.0
    low_moderate: float = 25.0


@dataclass(frozen=True)
class PatternCountThresholds:
    four_above: float = 70.0
    three_above: float = 40.0


DEFAULT_WEIGHTS = ScoringWeights()
DEFAULT_RECOMMENDATION_THRESHOLDS = RecommendationThresholds()
DEFAULT_PATTERN_THRESHOLDS = PatternCountThresholds()

PROBABILITY_BOUNDS = (0.0, 100.0)
HINT_SCORE_BOUNDS = (5.0, 95.0)
