import re

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def words(text: str) -> list[str]:
    return text.split()


def sentences(text: str) -> list[str]:
    return [chunk for chunk in _SENTENCE_SPLIT_RE.split(text) if chunk.strip()]


def contains_any(text: str, phrases: tuple[str, ...]) -> bool:
    return any(phrase in text for phrase in phrases)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
