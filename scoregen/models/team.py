"""Team strength categories, ratings and profiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from scoregen.errors import InvalidRating

MIN_RATING: int = 0
MAX_RATING: int = 100


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def _require_int(rating: object) -> int:
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise InvalidRating(f"Rating must be an integer, got {rating!r}")
    return rating


class TeamStrength(Enum):
    """Tier of team quality with its inclusive rating bracket."""

    ELITE = (85, 95)
    STRONG = (70, 84)
    MEDIUM = (55, 69)
    WEAK = (40, 54)
    RELEGATION = (0, 39)

    @property
    def min_rating(self) -> int:
        return self.value[0]

    @property
    def max_rating(self) -> int:
        return self.value[1]

    def is_valid_rating(self, rating: int) -> bool:
        return self.min_rating <= rating <= self.max_rating

    @classmethod
    def from_rating(cls, rating: int) -> "TeamStrength":
        """Return the category whose bracket contains ``rating``."""
        for strength in cls:
            if strength.is_valid_rating(rating):
                return strength
        raise InvalidRating(f"Rating {rating} does not match any category")


@dataclass(frozen=True)
class TeamRating:
    """Overall quality in [0, 100] and the attack/defense factors derived from it.

    attack_factor:  0.5 at rating 0, 1.0 at 50, 1.5 at 100.
    defense_factor: fraction of the opponent's expected goals suppressed,
                    0.0 at rating 0, 0.25 at 50, 0.5 at 100.
    """

    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _clamp(_require_int(self.value), MIN_RATING, MAX_RATING))

    @property
    def attack_factor(self) -> float:
        return 0.5 + self.value / 100.0

    @property
    def defense_factor(self) -> float:
        return (self.value / 100.0) * 0.5


@dataclass(frozen=True)
class TeamProfile:
    """Team record consumed by the score generator.

    The stored rating is clamped to [0, 100] but the category check runs
    against the rating as given, so an out-of-bracket input always raises.
    """

    name: str = field(compare=False)
    code: str
    category: TeamStrength
    rating: int

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Team name cannot be empty")
        if not self.code:
            raise ValueError("Team code cannot be empty")
        object.__setattr__(self, "category", _coerce_category(self.category))

        declared = _require_int(self.rating)
        object.__setattr__(self, "rating", _clamp(declared, MIN_RATING, MAX_RATING))

        if not self.category.is_valid_rating(declared):
            raise InvalidRating(
                f"Rating {declared} is not valid for category {self.category.name} "
                f"(valid range: {self.category.min_rating}-{self.category.max_rating})"
            )

    @property
    def strength(self) -> TeamRating:
        return TeamRating(self.rating)

    @property
    def attack_factor(self) -> float:
        return self.strength.attack_factor

    @property
    def defense_factor(self) -> float:
        return self.strength.defense_factor

    def __str__(self) -> str:
        return f"{self.name} ({self.code}) - {self.category.name} [{self.rating}]"


def _coerce_category(category: Union[TeamStrength, str]) -> TeamStrength:
    if isinstance(category, TeamStrength):
        return category
    if isinstance(category, str):
        try:
            return TeamStrength[category.strip().upper()]
        except KeyError:
            pass
    raise ValueError(f"Unknown team category: {category!r}")
