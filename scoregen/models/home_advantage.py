"""Home field advantage multipliers."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields

from scoregen.errors import InvalidConfiguration

DEFAULT_HOME_ATTACK_BOOST: float = 1.15
DEFAULT_HOME_DEFENSE_BOOST: float = 1.10
DEFAULT_AWAY_ATTACK_PENALTY: float = 0.95
DEFAULT_AWAY_DEFENSE_PENALTY: float = 0.90


@dataclass(frozen=True)
class HomeAdvantageConfig:
    """Multipliers applied to attack and defense by venue role.

    Defaults: home sides score ~15% more and defend ~10% better, away
    sides score ~5% less and defend ~10% worse.
    """

    home_attack_boost: float = DEFAULT_HOME_ATTACK_BOOST
    home_defense_boost: float = DEFAULT_HOME_DEFENSE_BOOST
    away_attack_penalty: float = DEFAULT_AWAY_ATTACK_PENALTY
    away_defense_penalty: float = DEFAULT_AWAY_DEFENSE_PENALTY

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidConfiguration(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value) or value <= 0:
                raise InvalidConfiguration(f"{f.name} must be positive, got {value}")
            object.__setattr__(self, f.name, float(value))

    @classmethod
    def neutral(cls) -> "HomeAdvantageConfig":
        """No home advantage (neutral venue)."""
        return cls(1.0, 1.0, 1.0, 1.0)

    def apply_to_attack(self, strength: float, is_home: bool) -> float:
        return strength * (self.home_attack_boost if is_home else self.away_attack_penalty)

    def apply_to_defense(self, strength: float, is_home: bool) -> float:
        return strength * (self.home_defense_boost if is_home else self.away_defense_penalty)

    def __str__(self) -> str:
        return (
            f"HomeAdvantage[attack: {(self.home_attack_boost - 1.0) * 100:+.0f}%, "
            f"defense: {(self.home_defense_boost - 1.0) * 100:+.0f}%, "
            f"away attack: {(self.away_attack_penalty - 1.0) * 100:+.0f}%, "
            f"away defense: {(self.away_defense_penalty - 1.0) * 100:+.0f}%]"
        )
