"""FastAPI entrypoint for the score generator."""

from __future__ import annotations

import threading
from typing import Any, Dict, Optional

import numpy as np
from fastapi import FastAPI, HTTPException
from loguru import logger
from pydantic import BaseModel, Field

from scoregen.config import get_settings
from scoregen.engine.generator import ScoreGenerator
from scoregen.engine.simulation import simulate_matches
from scoregen.errors import InvalidRating
from scoregen.models.home_advantage import HomeAdvantageConfig
from scoregen.models.poisson import run_poisson
from scoregen.models.team import TeamProfile


app = FastAPI(title="Score Generator API")


class TeamRequest(BaseModel):
    name: str
    code: str
    category: str
    rating: int


class MatchRequest(BaseModel):
    home: TeamRequest
    away: TeamRequest
    neutral_venue: bool = False
    seed: Optional[int] = Field(None, ge=0)


class SimulateRequest(MatchRequest):
    matches: int = Field(1000, ge=1, le=100_000)


def _team(request: TeamRequest) -> TeamProfile:
    try:
        return TeamProfile(
            name=request.name,
            code=request.code,
            category=request.category,
            rating=request.rating,
        )
    except InvalidRating as exc:
        logger.warning(f"Rejected team {request.code}: {exc}")
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


_shared_lock = threading.Lock()


def _shared_generators() -> Dict[bool, ScoreGenerator]:
    """Long-lived generators keyed by neutral venue, built from settings on first use."""
    with _shared_lock:
        if not hasattr(_shared_generators, "_generators"):
            settings = get_settings()
            _shared_generators._generators = {
                False: ScoreGenerator.from_settings(settings),
                True: ScoreGenerator(
                    home_advantage=HomeAdvantageConfig.neutral(),
                    rng=np.random.default_rng(settings.seed),
                    base_rate=settings.base_rate,
                    max_goals=settings.max_goals,
                ),
            }
        return _shared_generators._generators


def _generator(request: MatchRequest) -> ScoreGenerator:
    shared = _shared_generators()[request.neutral_venue]
    if request.seed is None:
        return shared
    return ScoreGenerator(
        home_advantage=shared.home_advantage,
        rng=np.random.default_rng(request.seed),
        base_rate=shared.base_rate,
        max_goals=shared.max_goals,
    )


def _fixture(home: TeamProfile, away: TeamProfile) -> Dict[str, Any]:
    return {"home": str(home), "away": str(away)}


@app.get("/api/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/api/expected-goals")
def get_expected_goals(request: MatchRequest) -> Dict[str, Any]:
    home, away = _team(request.home), _team(request.away)
    expectation = _generator(request).expected_goals(home, away)
    return {
        **_fixture(home, away),
        "expected_home_goals": round(expectation.home_lambda, 4),
        "expected_away_goals": round(expectation.away_lambda, 4),
    }


@app.post("/api/score")
def get_score(request: MatchRequest) -> Dict[str, Any]:
    home, away = _team(request.home), _team(request.away)
    score = _generator(request).generate(home, away)
    return {**_fixture(home, away), **score.as_dict(), "score": score.format(), "outcome": score.outcome}


@app.post("/api/simulate")
def simulate(request: SimulateRequest) -> Dict[str, Any]:
    home, away = _team(request.home), _team(request.away)
    summary = simulate_matches(_generator(request), home, away, request.matches)
    return {**_fixture(home, away), **summary.as_dict()}


@app.post("/api/probabilities")
def get_probabilities(request: MatchRequest) -> Dict[str, Any]:
    home, away = _team(request.home), _team(request.away)
    generator = _generator(request)
    output = run_poisson(generator.expected_goals(home, away), generator.max_goals)
    most_likely = output.score_matrix.most_likely()
    return {
        **_fixture(home, away),
        "expected_home_goals": round(output.expected_home_goals, 4),
        "expected_away_goals": round(output.expected_away_goals, 4),
        "home_win": round(output.home_win, 4),
        "draw": round(output.draw, 4),
        "away_win": round(output.away_win, 4),
        "over_25": round(output.over_25, 4),
        "under_25": round(output.under_25, 4),
        "most_likely_score": f"{most_likely[0]}-{most_likely[1]}",
    }
