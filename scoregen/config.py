"""Configuration loader for the score generator."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, List, Optional, TypeVar

from dotenv import load_dotenv
from loguru import logger

from scoregen.engine.generator import MAX_GOALS
from scoregen.engine.rate_model import BASE_EXPECTED_GOALS, check_base_rate
from scoregen.errors import InvalidConfiguration
from scoregen.models.home_advantage import (
    DEFAULT_AWAY_ATTACK_PENALTY,
    DEFAULT_AWAY_DEFENSE_PENALTY,
    DEFAULT_HOME_ATTACK_BOOST,
    DEFAULT_HOME_DEFENSE_BOOST,
    HomeAdvantageConfig,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Settings:
    """Generator settings loaded from environment variables."""

    base_rate: float = BASE_EXPECTED_GOALS
    max_goals: int = MAX_GOALS
    home_attack_boost: float = DEFAULT_HOME_ATTACK_BOOST
    home_defense_boost: float = DEFAULT_HOME_DEFENSE_BOOST
    away_attack_penalty: float = DEFAULT_AWAY_ATTACK_PENALTY
    away_defense_penalty: float = DEFAULT_AWAY_DEFENSE_PENALTY
    seed: Optional[int] = None

    def home_advantage(self) -> HomeAdvantageConfig:
        return HomeAdvantageConfig(
            home_attack_boost=self.home_attack_boost,
            home_defense_boost=self.home_defense_boost,
            away_attack_penalty=self.away_attack_penalty,
            away_defense_penalty=self.away_defense_penalty,
        )


def _read(name: str, parse: Callable[[str], T], default: T, invalid: List[str]) -> T:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return parse(raw)
    except ValueError:
        invalid.append(name)
        return default


def load_settings() -> Settings:
    """Load environment variables and return settings."""
    load_dotenv()
    invalid: List[str] = []
    settings = Settings(
        base_rate=_read("SCOREGEN_BASE_RATE", float, BASE_EXPECTED_GOALS, invalid),
        max_goals=_read("SCOREGEN_MAX_GOALS", int, MAX_GOALS, invalid),
        home_attack_boost=_read("SCOREGEN_HOME_ATTACK_BOOST", float, DEFAULT_HOME_ATTACK_BOOST, invalid),
        home_defense_boost=_read("SCOREGEN_HOME_DEFENSE_BOOST", float, DEFAULT_HOME_DEFENSE_BOOST, invalid),
        away_attack_penalty=_read("SCOREGEN_AWAY_ATTACK_PENALTY", float, DEFAULT_AWAY_ATTACK_PENALTY, invalid),
        away_defense_penalty=_read("SCOREGEN_AWAY_DEFENSE_PENALTY", float, DEFAULT_AWAY_DEFENSE_PENALTY, invalid),
        seed=_read("SCOREGEN_SEED", int, None, invalid),
    )

    try:
        check_base_rate(settings.base_rate)
    except InvalidConfiguration:
        invalid.append("SCOREGEN_BASE_RATE")
    if settings.max_goals < 0:
        invalid.append("SCOREGEN_MAX_GOALS")
    if settings.seed is not None and settings.seed < 0:
        invalid.append("SCOREGEN_SEED")
    try:
        settings.home_advantage()
    except InvalidConfiguration as exc:
        logger.error(f"Invalid home advantage settings: {exc}")
        invalid.append("SCOREGEN_HOME_*/SCOREGEN_AWAY_*")

    if invalid:
        raise RuntimeError(
            "Invalid values for environment variables: " + ", ".join(invalid)
        )

    logger.info(
        f"Loaded settings: base_rate={settings.base_rate}, max_goals={settings.max_goals}, "
        f"{settings.home_advantage()}"
    )
    return settings


def get_settings() -> Settings:
    """Get cached settings instance."""
    if not hasattr(get_settings, "_settings"):
        get_settings._settings = load_settings()
    return get_settings._settings
