"""Strength-aware match score generator."""

from scoregen.engine.generator import ScoreGenerator, generate_score
from scoregen.engine.rate_model import MatchExpectation, expected_goals, expected_goals_pair
from scoregen.errors import InvalidConfiguration, InvalidRating, InvalidScore
from scoregen.models.home_advantage import HomeAdvantageConfig
from scoregen.models.score import Score
from scoregen.models.team import TeamProfile, TeamRating, TeamStrength

__all__ = [
    "HomeAdvantageConfig",
    "InvalidConfiguration",
    "InvalidRating",
    "InvalidScore",
    "MatchExpectation",
    "Score",
    "ScoreGenerator",
    "TeamProfile",
    "TeamRating",
    "TeamStrength",
    "expected_goals",
    "expected_goals_pair",
    "generate_score",
]
