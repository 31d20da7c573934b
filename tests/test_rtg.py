import json

import pytest

from roundnetpairing.constants import MIN_PLAYERS, MODE_MIXED
from roundnetpairing.testing import (
    RandomTournamentGenerator,
    ResultPattern,
    RTGConfig,
    SkillDistribution,
)
from roundnetpairing.testing.rtg import (
    create_mixed_tournament,
    create_normal_tournament,
    create_small_tournament,
    summarize_tournament,
)


def _assert_rounds_sound(tournament_data, expected_rounds):
    assert tournament_data["errors"] == []
    assert len(tournament_data["rounds"]) == expected_rounds
    for round_payload in tournament_data["rounds"]:
        assert round_payload["success"]
        assert round_payload["validation_errors"] == []


def test_small_tournament_everyone_plays_every_round():
    data = create_small_tournament(seed=1).generate_complete_tournament()

    _assert_rounds_sound(data, 4)
    for player in data["players"]:
        assert player.games_played == 4
        assert player.bye_history == []


def test_byes_are_spread_evenly():
    generator = create_normal_tournament(num_players=22, seed=7)
    data = generator.generate_complete_tournament()

    _assert_rounds_sound(data, 6)
    bye_counts = [p.bye_count for p in data["players"]]
    assert sum(bye_counts) == 12
    assert max(bye_counts) - min(bye_counts) <= 1
    for player in data["players"]:
        assert player.games_played + player.bye_count == 6


def test_mixed_tournament_uses_groups_of_8_and_12():
    data = create_mixed_tournament(seed=3).generate_complete_tournament()

    _assert_rounds_sound(data, 5)
    for round_payload in data["rounds"]:
        assert len(round_payload["byes"]) == 2
        assert len(round_payload["matches"]) == 7


def test_repeat_partners_avoided_in_small_field():
    # 8 players in two groups of four: three rounds can always avoid repeats
    config = RTGConfig(num_players=8, num_rounds=3, seed=11)
    data = RandomTournamentGenerator(config).generate_complete_tournament()

    _assert_rounds_sound(data, 3)
    assert data["rounds"][0]["repeat_partnerships"] == 0


@pytest.mark.parametrize("distribution", list(SkillDistribution))
@pytest.mark.parametrize("pattern", list(ResultPattern))
def test_every_distribution_and_pattern(distribution, pattern):
    config = RTGConfig(
        num_players=13,
        num_rounds=3,
        skill_distribution=distribution,
        result_pattern=pattern,
        seed=5,
    )
    data = RandomTournamentGenerator(config).generate_complete_tournament()

    _assert_rounds_sound(data, 3)
    for round_payload in data["rounds"]:
        for match in round_payload["matches"]:
            assert match["team1_score"] != match["team2_score"]
            assert max(match["team1_score"], match["team2_score"]) >= 21


def test_dropouts_never_go_below_minimum():
    config = RTGConfig(num_players=16, num_rounds=6, dropout_rate=0.3, seed=8)
    data = RandomTournamentGenerator(config).generate_complete_tournament()

    _assert_rounds_sound(data, 6)
    tournament = data["tournament"]
    assert len(tournament.get_player_list(active_only=True)) >= MIN_PLAYERS
    assert data["rounds"][0]["dropouts"] == []


def test_bonus_scoring_gives_fractional_points():
    config = RTGConfig(
        num_players=8,
        num_rounds=2,
        scoring_system="win-loss-bonus",
        bonus_points_enabled=True,
        seed=2,
    )
    data = RandomTournamentGenerator(config).generate_complete_tournament()

    _assert_rounds_sound(data, 2)
    assert any(p.score != int(p.score) for p in data["players"])


def test_seed_makes_tournaments_reproducible():
    def leaderboard():
        config = RTGConfig(
            num_players=18, num_rounds=4, seed=99, grouping_mode=MODE_MIXED
        )
        data = RandomTournamentGenerator(config).generate_complete_tournament()
        return [(p.id, p.score) for p in data["tournament"].get_leaderboard()]

    assert leaderboard() == leaderboard()


def test_export_and_summary():
    generator = create_small_tournament(seed=4)
    data = generator.generate_complete_tournament()

    exported = json.loads(generator.export_json_format(data))
    assert exported["tournament_config"]["num_players"] == 8
    assert len(exported["tournament"]["rounds"]) == 4
    assert len(exported["leaderboard"]) == 8

    summary = summarize_tournament(data)
    assert summary["rounds_played"] == 4
    assert summary["validation_errors"] == 0
