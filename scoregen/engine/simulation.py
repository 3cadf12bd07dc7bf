"""Repeated score generation for a single fixture."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from loguru import logger

from scoregen.engine.generator import ScoreGenerator
from scoregen.engine.rate_model import Rated


@dataclass
class SimulationSummary:
    matches: int
    home_wins: int = 0
    draws: int = 0
    away_wins: int = 0
    home_goals: int = 0
    away_goals: int = 0
    # goal_counts[side][n] = matches where that side scored n
    home_goal_counts: List[int] = field(default_factory=list)
    away_goal_counts: List[int] = field(default_factory=list)

    @property
    def home_win_rate(self) -> float:
        return self.home_wins / self.matches

    @property
    def draw_rate(self) -> float:
        return self.draws / self.matches

    @property
    def away_win_rate(self) -> float:
        return self.away_wins / self.matches

    @property
    def avg_home_goals(self) -> float:
        return self.home_goals / self.matches

    @property
    def avg_away_goals(self) -> float:
        return self.away_goals / self.matches

    @property
    def avg_goals_per_match(self) -> float:
        return (self.home_goals + self.away_goals) / self.matches

    def as_dict(self) -> Dict[str, Any]:
        return {
            "matches": self.matches,
            "home_wins": self.home_wins,
            "draws": self.draws,
            "away_wins": self.away_wins,
            "home_win_rate": round(self.home_win_rate, 4),
            "draw_rate": round(self.draw_rate, 4),
            "away_win_rate": round(self.away_win_rate, 4),
            "avg_home_goals": round(self.avg_home_goals, 3),
            "avg_away_goals": round(self.avg_away_goals, 3),
            "avg_goals_per_match": round(self.avg_goals_per_match, 3),
            "home_goal_counts": list(self.home_goal_counts),
            "away_goal_counts": list(self.away_goal_counts),
        }


def simulate_matches(
    generator: ScoreGenerator,
    home: Rated,
    away: Rated,
    matches: int = 1000,
) -> SimulationSummary:
    """Generate ``matches`` scores for the same fixture and tally them."""
    if matches < 1:
        raise ValueError(f"matches must be at least 1, got {matches}")

    summary = SimulationSummary(
        matches=matches,
        home_goal_counts=[0] * (generator.max_goals + 1),
        away_goal_counts=[0] * (generator.max_goals + 1),
    )
    for _ in range(matches):
        score = generator.generate(home, away)
        if score.is_home_win():
            summary.home_wins += 1
        elif score.is_draw():
            summary.draws += 1
        else:
            summary.away_wins += 1
        summary.home_goals += score.home_goals
        summary.away_goals += score.away_goals
        summary.home_goal_counts[score.home_goals] += 1
        summary.away_goal_counts[score.away_goals] += 1

    logger.info(
        f"Simulated {matches} matches: {summary.home_wins}W {summary.draws}D "
        f"{summary.away_wins}L, avg {summary.avg_goals_per_match:.2f} goals"
    )
    return summary
