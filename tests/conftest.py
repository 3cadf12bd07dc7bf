import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

SETTINGS_ENV = (
    "SCOREGEN_BASE_RATE",
    "SCOREGEN_MAX_GOALS",
    "SCOREGEN_HOME_ATTACK_BOOST",
    "SCOREGEN_HOME_DEFENSE_BOOST",
    "SCOREGEN_AWAY_ATTACK_PENALTY",
    "SCOREGEN_AWAY_DEFENSE_PENALTY",
    "SCOREGEN_SEED",
)


def _clear_cached_settings():
    from scoregen.config import get_settings
    from scoregen.main import _shared_generators

    if hasattr(get_settings, "_settings"):
        del get_settings._settings
    if hasattr(_shared_generators, "_generators"):
        del _shared_generators._generators


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    _clear_cached_settings()
    yield
    _clear_cached_settings()


@pytest.fixture()
def elite():
    from scoregen.models.team import TeamProfile, TeamStrength

    return TeamProfile("Manchester City", "MCI", TeamStrength.ELITE, 95)


@pytest.fixture()
def weak():
    from scoregen.models.team import TeamProfile, TeamStrength

    return TeamProfile("West Ham United", "WHU", TeamStrength.WEAK, 50)
