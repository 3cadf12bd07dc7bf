"""Expected goals (Poisson rate) from team strength and venue role."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from loguru import logger

from scoregen.errors import InvalidConfiguration
from scoregen.models.home_advantage import HomeAdvantageConfig

BASE_EXPECTED_GOALS: float = 1.75
MIN_EXPECTED_GOALS: float = 0.1

_DEFAULT_CONFIG = HomeAdvantageConfig()


def check_base_rate(base_rate: float) -> None:
    if not math.isfinite(base_rate) or base_rate <= 0:
        raise InvalidConfiguration(f"base_rate must be a finite positive number, got {base_rate}")


class Rated(Protocol):
    @property
    def attack_factor(self) -> float: ...

    @property
    def defense_factor(self) -> float: ...


@dataclass(frozen=True)
class MatchExpectation:
    """Expected goals for both sides of one fixture."""

    home_lambda: float
    away_lambda: float

    @property
    def total(self) -> float:
        return self.home_lambda + self.away_lambda

    def as_tuple(self) -> Tuple[float, float]:
        return self.home_lambda, self.away_lambda


def expected_goals(
    attacking: Rated,
    defending: Rated,
    attacking_side_is_home: bool,
    config: Optional[HomeAdvantageConfig] = None,
    base_rate: float = BASE_EXPECTED_GOALS,
) -> float:
    """Expected goals for ``attacking`` against ``defending``.

        lambda = base_rate * attack * (1 - defense), floored at 0.1

    The defending side takes the opposite venue role, so when the attacker
    is at home the away defense penalty applies and vice versa.
    """
    check_base_rate(base_rate)
    config = config or _DEFAULT_CONFIG

    attack = config.apply_to_attack(attacking.attack_factor, attacking_side_is_home)
    defense = config.apply_to_defense(defending.defense_factor, not attacking_side_is_home)

    lam = base_rate * attack * (1.0 - defense)
    return max(lam, MIN_EXPECTED_GOALS)


def expected_goals_pair(
    home: Rated,
    away: Rated,
    config: Optional[HomeAdvantageConfig] = None,
    base_rate: float = BASE_EXPECTED_GOALS,
) -> MatchExpectation:
    """Expected goals for both sides without sampling."""
    expectation = MatchExpectation(
        home_lambda=expected_goals(home, away, True, config, base_rate),
        away_lambda=expected_goals(away, home, False, config, base_rate),
    )
    logger.debug(
        f"Expected goals: {expectation.home_lambda:.2f} vs {expectation.away_lambda:.2f}"
    )
    return expectation
