"""Exact score distribution of the capped independent Poisson model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np
from scipy.stats import poisson

from scoregen.engine.rate_model import MatchExpectation


@dataclass(frozen=True)
class ScoreMatrix:
    """P(home_goals, away_goals) for every scoreline up to the goal cap.

    Row i, column j holds the chance of an i-j result; the last row and
    column carry all the mass at or above the cap.
    """

    matrix: np.ndarray
    max_goals: int

    def probability(self, home_goals: int, away_goals: int) -> float:
        """Chance of exactly this capped scoreline; 0.0 outside the grid."""
        in_grid = 0 <= home_goals <= self.max_goals and 0 <= away_goals <= self.max_goals
        if not in_grid:
            return 0.0
        return float(self.matrix[home_goals, away_goals])

    def most_likely(self) -> Tuple[int, int]:
        home_goals, away_goals = np.unravel_index(np.argmax(self.matrix), self.matrix.shape)
        return int(home_goals), int(away_goals)


@dataclass(frozen=True)
class PoissonOutput:
    """Outcome probabilities of one fixture under independent capped Poisson goals.

    expected_*_goals are the uncapped rates fed into the matrix.
    """

    score_matrix: ScoreMatrix
    expected_home_goals: float
    expected_away_goals: float
    home_win: float
    draw: float
    away_win: float
    over_25: float
    under_25: float


def capped_pmf(lam: float, max_goals: int) -> np.ndarray:
    """P(min(X, max_goals) = k) for X ~ Poisson(lam), k = 0..max_goals."""
    goals = np.arange(max_goals + 1)
    pmf = poisson.pmf(goals, lam)
    # Everything at or above the cap lands on the cap.
    pmf[max_goals] = poisson.sf(max_goals - 1, lam)
    return pmf


def build_score_matrix(
    home_lambda: float,
    away_lambda: float,
    max_goals: int = 6,
) -> ScoreMatrix:
    """Joint distribution of independently sampled, capped goal counts."""
    matrix = np.outer(capped_pmf(home_lambda, max_goals), capped_pmf(away_lambda, max_goals))
    matrix /= matrix.sum()
    return ScoreMatrix(matrix=matrix, max_goals=max_goals)


def summarize_from_matrix(score_matrix: ScoreMatrix) -> Dict[str, float]:
    """Home/draw/away from the lower triangle, diagonal and upper triangle;
    over/under 2.5 from the anti-diagonal sums."""
    matrix = score_matrix.matrix
    home_win = float(np.tril(matrix, -1).sum())
    draw = float(np.trace(matrix))
    away_win = float(np.triu(matrix, 1).sum())

    totals = np.add.outer(np.arange(matrix.shape[0]), np.arange(matrix.shape[1]))
    over_25 = float(matrix[totals > 2].sum())
    return {
        "home_win": home_win,
        "draw": draw,
        "away_win": away_win,
        "over_25": over_25,
        "under_25": 1.0 - over_25,
    }


def run_poisson(expectation: MatchExpectation, max_goals: int = 6) -> PoissonOutput:
    """Score matrix and outcome probabilities for one match expectation."""
    matrix = build_score_matrix(expectation.home_lambda, expectation.away_lambda, max_goals)
    summary = summarize_from_matrix(matrix)
    return PoissonOutput(
        score_matrix=matrix,
        expected_home_goals=expectation.home_lambda,
        expected_away_goals=expectation.away_lambda,
        home_win=summary["home_win"],
        draw=summary["draw"],
        away_win=summary["away_win"],
        over_25=summary["over_25"],
        under_25=summary["under_25"],
    )
