import threading

import numpy as np
import pytest

from scoregen.config import Settings
from scoregen.engine.generator import MAX_GOALS, ScoreGenerator, generate_score
from scoregen.errors import InvalidConfiguration
from scoregen.models.home_advantage import HomeAdvantageConfig
from scoregen.models.score import Score
from scoregen.models.team import TeamProfile, TeamRating, TeamStrength


def test_scores_within_range(elite, weak):
    generator = ScoreGenerator.seeded(1)
    for _ in range(500):
        score = generator.generate(elite, weak)
        assert isinstance(score, Score)
        assert 0 <= score.home_goals <= MAX_GOALS
        assert 0 <= score.away_goals <= MAX_GOALS


def test_cap_is_applied():
    generator = ScoreGenerator.seeded(3, base_rate=20.0, max_goals=2)
    scores = [generator.generate(TeamRating(100), TeamRating(0)) for _ in range(50)]
    assert all(s.home_goals <= 2 and s.away_goals <= 2 for s in scores)
    assert any(s.home_goals == 2 for s in scores)


def test_zero_cap_always_goalless(elite, weak):
    generator = ScoreGenerator.seeded(3, max_goals=0)
    assert all(generator.generate(elite, weak) == Score(0, 0) for _ in range(20))


def test_same_seed_reproduces_sequence():
    home = TeamProfile("Team A", "TEA", TeamStrength.STRONG, 80)
    away = TeamProfile("Team B", "TEB", TeamStrength.MEDIUM, 60)
    gen1 = ScoreGenerator.seeded(999)
    gen2 = ScoreGenerator.seeded(999)
    assert [gen1.generate(home, away) for _ in range(20)] == [
        gen2.generate(home, away) for _ in range(20)
    ]


def test_different_seeds_diverge():
    home = TeamProfile("Team A", "TEA", TeamStrength.STRONG, 80)
    away = TeamProfile("Team B", "TEB", TeamStrength.MEDIUM, 60)
    gen1 = ScoreGenerator.seeded(999)
    gen2 = ScoreGenerator.seeded(777)
    first = [gen1.generate(home, away) for _ in range(50)]
    second = [gen2.generate(home, away) for _ in range(50)]
    assert first != second


def test_function_matches_generator():
    config = HomeAdvantageConfig()
    home, away = TeamRating(75), TeamRating(65)
    rng = np.random.default_rng(11)
    direct = [generate_score(home, away, config, rng) for _ in range(30)]
    generator = ScoreGenerator(config, np.random.default_rng(11))
    assert direct == [generator.generate(home, away) for _ in range(30)]


def test_home_advantage_between_equal_teams():
    team_a = TeamProfile("Team A", "TEA", TeamStrength.MEDIUM, 65)
    team_b = TeamProfile("Team B", "TEB", TeamStrength.MEDIUM, 65)
    generator = ScoreGenerator.seeded(123)
    scores = [generator.generate(team_a, team_b) for _ in range(1000)]
    home_wins = sum(s.is_home_win() for s in scores)
    away_wins = sum(s.is_away_win() for s in scores)
    assert home_wins > away_wins


def test_elite_dominates_relegation_side():
    elite = TeamProfile("Elite Team", "ELI", TeamStrength.ELITE, 95)
    relegation = TeamProfile("Weak Team", "WEA", TeamStrength.RELEGATION, 35)
    generator = ScoreGenerator.seeded(456)
    scores = [generator.generate(elite, relegation) for _ in range(500)]
    assert sum(s.is_home_win() for s in scores) / 500 > 0.6
    assert sum(s.home_goals for s in scores) / 500 > 2.0


def test_expected_goals_uses_generator_config(elite, weak):
    neutral = ScoreGenerator(HomeAdvantageConfig.neutral(), np.random.default_rng(0))
    pair = neutral.expected_goals(elite, elite)
    assert pair.home_lambda == pair.away_lambda
    default = ScoreGenerator.seeded(0).expected_goals(elite, weak)
    assert default.home_lambda == pytest.approx(2.2615, abs=0.001)


def test_expected_goals_consumes_no_entropy(elite, weak):
    gen1 = ScoreGenerator.seeded(8)
    gen2 = ScoreGenerator.seeded(8)
    gen1.expected_goals(elite, weak)
    assert gen1.generate(elite, weak) == gen2.generate(elite, weak)


def test_from_settings():
    settings = Settings(base_rate=1.5, max_goals=4, seed=21)
    generator = ScoreGenerator.from_settings(settings)
    assert generator.base_rate == 1.5
    assert generator.max_goals == 4
    assert generator.home_advantage == HomeAdvantageConfig()
    other = ScoreGenerator.from_settings(settings)
    home, away = TeamRating(70), TeamRating(60)
    assert [generator.generate(home, away) for _ in range(10)] == [
        other.generate(home, away) for _ in range(10)
    ]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"base_rate": 0},
        {"base_rate": float("nan")},
        {"base_rate": float("inf")},
        {"max_goals": -1},
        {"max_goals": 2.5},
    ],
)
def test_rejects_invalid_parameters(kwargs):
    with pytest.raises(InvalidConfiguration):
        ScoreGenerator(**kwargs)


def test_shared_generator_across_threads(elite, weak):
    generator = ScoreGenerator.seeded(42)
    results = []

    def worker():
        for _ in range(200):
            results.append(generator.generate(elite, weak))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 800
    assert all(0 <= s.home_goals <= MAX_GOALS and 0 <= s.away_goals <= MAX_GOALS for s in results)


@pytest.mark.parametrize("base_rate", [float("nan"), float("inf")])
def test_generate_score_rejects_non_finite_base_rate(base_rate):
    with pytest.raises(InvalidConfiguration):
        generate_score(
            TeamRating(50), TeamRating(50), HomeAdvantageConfig(), np.random.default_rng(0), base_rate
        )
