"""Final score of a simulated match."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from scoregen.errors import InvalidScore


@dataclass(frozen=True)
class Score:
    """Immutable home/away goal pair."""

    home_goals: int
    away_goals: int

    def __post_init__(self) -> None:
        for label, goals in (("home_goals", self.home_goals), ("away_goals", self.away_goals)):
            if isinstance(goals, bool) or not isinstance(goals, int):
                raise InvalidScore(f"{label} must be an integer, got {goals!r}")
            if goals < 0:
                raise InvalidScore(f"Goal counts cannot be negative ({label}={goals})")

    @property
    def goal_difference(self) -> int:
        """Home minus away; positive means a home win."""
        return self.home_goals - self.away_goals

    @property
    def total_goals(self) -> int:
        return self.home_goals + self.away_goals

    def is_home_win(self) -> bool:
        return self.home_goals > self.away_goals

    def is_away_win(self) -> bool:
        return self.away_goals > self.home_goals

    def is_draw(self) -> bool:
        return self.home_goals == self.away_goals

    @property
    def outcome(self) -> str:
        if self.is_home_win():
            return "home"
        if self.is_away_win():
            return "away"
        return "draw"

    def format(self) -> str:
        return f"{self.home_goals}-{self.away_goals}"

    def as_dict(self) -> Dict[str, int]:
        return {"home_goals": self.home_goals, "away_goals": self.away_goals}

    def __str__(self) -> str:
        return self.format()
