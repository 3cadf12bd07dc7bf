"""Strength-aware score generation.

Algorithm:
    1. Expected goals for each side from attack strength, the opponent's
       defense and the home advantage multipliers.
    2. Goals for each side sampled from Poisson(expected goals).
    3. Each side capped at ``max_goals``.
"""

from __future__ import annotations

import threading
from typing import Optional, TYPE_CHECKING

import numpy as np
from loguru import logger

from scoregen.engine.rate_model import (
    BASE_EXPECTED_GOALS,
    MatchExpectation,
    Rated,
    check_base_rate,
    expected_goals,
    expected_goals_pair,
)
from scoregen.engine.sampler import UniformSource, sample_poisson
from scoregen.errors import InvalidConfiguration
from scoregen.models.home_advantage import HomeAdvantageConfig
from scoregen.models.score import Score

if TYPE_CHECKING:
    from scoregen.config import Settings

MAX_GOALS: int = 6


def _validate(base_rate: float, max_goals: int) -> None:
    check_base_rate(base_rate)
    if isinstance(max_goals, bool) or not isinstance(max_goals, int) or max_goals < 0:
        raise InvalidConfiguration(f"max_goals must be a non-negative integer, got {max_goals!r}")


def generate_score(
    home: Rated,
    away: Rated,
    config: HomeAdvantageConfig,
    rng: UniformSource,
    base_rate: float = BASE_EXPECTED_GOALS,
    max_goals: int = MAX_GOALS,
) -> Score:
    """Sample one score for ``home`` hosting ``away``.

    The home side is always sampled first, so a seeded ``rng`` reproduces
    the same sequence of scores for the same sequence of calls.
    """
    _validate(base_rate, max_goals)
    home_lambda = expected_goals(home, away, True, config, base_rate)
    away_lambda = expected_goals(away, home, False, config, base_rate)

    home_goals = min(sample_poisson(home_lambda, rng), max_goals)
    away_goals = min(sample_poisson(away_lambda, rng), max_goals)
    return Score(home_goals, away_goals)


class ScoreGenerator:
    """Score generator bound to a home advantage config and a random source.

    The random source is the only mutable state; calls on a shared instance
    are serialized so each call consumes a contiguous run of draws.
    """

    def __init__(
        self,
        home_advantage: Optional[HomeAdvantageConfig] = None,
        rng: Optional[UniformSource] = None,
        base_rate: float = BASE_EXPECTED_GOALS,
        max_goals: int = MAX_GOALS,
    ) -> None:
        _validate(base_rate, max_goals)
        self.home_advantage = home_advantage or HomeAdvantageConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.base_rate = float(base_rate)
        self.max_goals = max_goals
        self._lock = threading.Lock()
        logger.debug(
            f"Score generator: base_rate={self.base_rate}, max_goals={max_goals}, "
            f"{self.home_advantage}"
        )

    @classmethod
    def seeded(
        cls,
        seed: int,
        home_advantage: Optional[HomeAdvantageConfig] = None,
        base_rate: float = BASE_EXPECTED_GOALS,
        max_goals: int = MAX_GOALS,
    ) -> "ScoreGenerator":
        """Reproducible generator over ``numpy.random.default_rng(seed)``."""
        return cls(home_advantage, np.random.default_rng(seed), base_rate, max_goals)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ScoreGenerator":
        rng = np.random.default_rng(settings.seed)
        return cls(settings.home_advantage(), rng, settings.base_rate, settings.max_goals)

    def generate(self, home: Rated, away: Rated) -> Score:
        with self._lock:
            return generate_score(
                home, away, self.home_advantage, self.rng, self.base_rate, self.max_goals
            )

    def expected_goals(self, home: Rated, away: Rated) -> MatchExpectation:
        return expected_goals_pair(home, away, self.home_advantage, self.base_rate)
