"""Poisson sampling with Knuth's multiplicative method."""

from __future__ import annotations

import math
from typing import Protocol

from loguru import logger


class UniformSource(Protocol):
    def random(self) -> float: ...


def sample_poisson(lam: float, rng: UniformSource) -> int:
    """Draw one value from Poisson(lam).

    Multiplies uniform draws from ``rng`` until the running product falls
    to exp(-lam); the number of draws minus one is Poisson distributed.
    Expected draws are lam + 1, fine for the low rates of a football match
    but not meant for large lam.

    ``rng`` may be a ``numpy.random.Generator`` or a ``random.Random``.
    """
    if not math.isfinite(lam):
        raise ValueError(f"Poisson rate must be finite, got {lam}")
    if lam <= 0:
        logger.warning(f"Non-positive Poisson rate {lam}, returning 0")
        return 0

    threshold = math.exp(-lam)
    p = 1.0
    k = 0
    while True:
        k += 1
        p *= rng.random()
        if p <= threshold:
            return k - 1
