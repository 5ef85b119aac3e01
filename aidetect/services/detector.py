from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from aidetect.core.config import Settings, get_settings
from aidetect.core.logging import get_logger
from aidetect.schemas.analyze import AnalysisDetails, DetectionMetadata, DetectionResult
from aidetect.schemas.common import ContentKind
from aidetect.services.features import extract_features
from aidetect.services.labels import algorithm_for, recommend, select_indicators, select_patterns
from aidetect.services.scoring import synthesize
from aidetect.utils.random_source import RandomSource, make_random_source

logger = get_logger(__name__)

FALLBACK_PATTERN = "Analysis error - using fallback detection"
FALLBACK_INDICATOR = "Fallback analysis mode"
FALLBACK_RECOMMENDATION = "Analysis completed with limited accuracy"


def coerce_content(content: str | bytes) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return content


class ContentDetector:
    def __init__(
        self,
        settings: Settings | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.settings = settings or get_settings()
        self._sleep = sleep

    def random_source(self, rng: RandomSource | None = None) -> RandomSource:
        if rng is not None:
            return rng
        return make_random_source(self.settings.detector_seed)

    def _delay_seconds(self, processing_time: float, deadline_seconds: float | None) -> float:
        if not self.settings.simulate_latency:
            return 0.0
        cap = self.settings.max_simulated_delay_seconds
        if deadline_seconds is not None:
            cap = min(cap, max(0.0, deadline_seconds))
        return min(processing_time, cap)

    async def detect(
        self,
        content: str | bytes,
        kind: ContentKind | str = ContentKind.TEXT,
        rng: RandomSource | None = None,
        deadline_seconds: float | None = None,
    ) -> DetectionResult:
        kind = ContentKind(kind)
        rng = self.random_source(rng)
        text = coerce_content(content)

        processing_time = rng.uniform(
            self.settings.simulated_delay_min_seconds,
            self.settings.simulated_delay_max_seconds,
        )
        delay = self._delay_seconds(processing_time, deadline_seconds)
        if delay > 0:
            # Plain asyncio sleep, so cancelling the task interrupts it.
            await self._sleep(delay)

        features = None if kind is ContentKind.IMAGE else extract_features(text)
        ai_probability, confidence = synthesize(kind, features, rng)

        result = DetectionResult(
            ai_probability=ai_probability,
            confidence=confidence,
            content_type=kind,
            analysis=AnalysisDetails(
                patterns=select_patterns(kind, ai_probability, rng),
                indicators=select_indicators(kind, rng),
                recommendation=recommend(ai_probability),
            ),
            metadata=DetectionMetadata(
                processing_time=processing_time,
                model_version=self.settings.model_version,
                algorithm=algorithm_for(kind),
                word_count=features.word_count if features else None,
                sentence_count=features.sentence_count if features else None,
            ),
        )

        logger.info(
            "detection_complete",
            content_type=kind.value,
            ai_probability=round(ai_probability, 3),
            confidence=round(confidence, 3),
            word_count=features.word_count if features else None,
            delay_seconds=round(delay, 3),
        )
        return result

    def fallback_result(self, kind: ContentKind | str, rng: RandomSource | None = None) -> DetectionResult:
        rng = self.random_source(rng)
        return DetectionResult(
            ai_probability=rng.random() * 100,
            confidence=85 + rng.random() * 15,
            content_type=ContentKind(kind),
            analysis=AnalysisDetails(
                patterns=[FALLBACK_PATTERN],
                indicators=[FALLBACK_INDICATOR],
                recommendation=FALLBACK_RECOMMENDATION,
            ),
        )

    async def detect_or_fallback(
        self,
        content: str | bytes,
        kind: ContentKind | str = ContentKind.TEXT,
        rng: RandomSource | None = None,
        deadline_seconds: float | None = None,
    ) -> DetectionResult:
        """Run ``detect`` and substitute a fallback result on any failure.

        Failures are logged and never surfaced to the caller. Cancellation is
        not an ``Exception`` and still propagates.
        """
        kind = ContentKind(kind)
        try:
            return await self.detect(content, kind, rng=rng, deadline_seconds=deadline_seconds)
        except Exception:
            logger.exception("detection_failed", content_type=kind.value)
            return self.fallback_result(kind, rng)


detector_service = ContentDetector()
