import os

os.environ.setdefault("SIMULATE_LATENCY", "false")
os.environ.setdefault("METRICS_ENABLED", "false")

import pytest  # noqa: E402

from aidetect.core.logging import configure_logging  # noqa: E402

configure_logging()


class ScriptedRandom:
    """Returns queued values instead of random draws.

    ``uniform`` pops from ``uniforms`` and falls back to the midpoint of the
    requested range; ``random`` pops from ``randoms`` and falls back to
    ``default_random``.
    """

    def __init__(self, uniforms=(), randoms=(), default_random=0.0):
        self.uniforms = list(uniforms)
        self.randoms = list(randoms)
        self.default_random = default_random
        self.uniform_calls: list[tuple[float, float]] = []

    def uniform(self, a, b):
        self.uniform_calls.append((a, b))
        if self.uniforms:
            return self.uniforms.pop(0)
        return (a + b) / 2

    def random(self):
        if self.randoms:
            return self.randoms.pop(0)
        return self.default_random


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
