import random

import pytest

from roundnetpairing.constants import SCORING_WIN_LOSS_BONUS
from roundnetpairing.exceptions import (
    DuplicatePlayerException,
    InvalidPlayerDataException,
    InvalidResultException,
    MatchNotFoundException,
    PlayerCountValidationException,
    PlayerNotFoundException,
    RoundNotFoundException,
    TournamentStateException,
)
from roundnetpairing.models import Match, Team, TournamentConfig
from roundnetpairing.tournament import ResultRecorder, Tournament


def _tournament(count, **config):
    tournament = Tournament(TournamentConfig(**config))
    for i in range(count):
        tournament.add_player(f"Player {i + 1:02d}", initial_skill_rating=3)
    return tournament


def _play_round(tournament, seed=0):
    result = tournament.generate_next_round(rng=random.Random(seed))
    assert result.success
    for match in result.matches:
        tournament.record_match_score(match.id, 21, 15)
    return result, tournament.complete_round()


def test_add_player_rejects_duplicates_and_blanks():
    tournament = Tournament()
    tournament.add_player("Alex")

    with pytest.raises(DuplicatePlayerException):
        tournament.add_player("  alex ")
    with pytest.raises(InvalidPlayerDataException):
        tournament.add_player("   ")
    with pytest.raises(InvalidPlayerDataException):
        tournament.add_player("Sam", initial_skill_rating=9)


def test_roster_limit():
    tournament = _tournament(8, max_players=8)
    with pytest.raises(PlayerCountValidationException):
        tournament.add_player("One Too Many")


def test_start_needs_eight_players():
    tournament = _tournament(7)
    with pytest.raises(PlayerCountValidationException):
        tournament.start()
    assert not tournament.is_started


def test_roster_is_locked_after_start():
    tournament = _tournament(8)
    tournament.start()

    assert tournament.current_round == 1
    with pytest.raises(TournamentStateException):
        tournament.add_player("Late")
    with pytest.raises(TournamentStateException):
        tournament.start()


def test_round_cannot_be_generated_before_start():
    with pytest.raises(TournamentStateException):
        _tournament(8).generate_next_round()


def test_full_round_updates_players():
    tournament = _tournament(8)
    tournament.start()

    result, completed = _play_round(tournament)

    assert completed.is_completed
    assert tournament.current_round == 2
    winners = {pid for m in result.matches for pid in m.team1.player_ids}
    for player in tournament.get_player_list():
        assert player.games_played == 1
        assert len(player.previous_teammates) == 1
        assert len(player.previous_opponents) == 2
        assert player.score == (3.0 if player.id in winners else 0.0)


def test_bye_players_get_bye_points():
    tournament = _tournament(10, bye_points=1.5)
    tournament.start()

    result, _ = _play_round(tournament)

    for player_id in result.byes:
        player = tournament.get_player(player_id)
        assert player.bye_history == [1]
        assert player.score == 1.5
        assert player.games_played == 0


def test_bonus_points_share_game_points():
    config = TournamentConfig(
        scoring_system=SCORING_WIN_LOSS_BONUS, bonus_points_enabled=True
    )
    match = Match(
        round_number=1,
        team1=Team("a", "b"),
        team2=Team("c", "d"),
        team1_score=21,
        team2_score=15,
        is_completed=True,
    )

    team1_points, team2_points = ResultRecorder().calculate_match_points(match, config)

    assert team1_points == pytest.approx(3 + 21 / 36)
    assert team2_points == pytest.approx(15 / 36)


def test_bonus_needs_both_switches():
    config = TournamentConfig(scoring_system=SCORING_WIN_LOSS_BONUS)
    match = Match(1, Team("a", "b"), Team("c", "d"), 10, 21, True)

    assert ResultRecorder().calculate_match_points(match, config) == (0.0, 3.0)


def test_unscored_match_has_no_points():
    match = Match(1, Team("a", "b"), Team("c", "d"))
    with pytest.raises(InvalidResultException):
        ResultRecorder().calculate_match_points(match, TournamentConfig())


def test_invalid_scores_are_rejected():
    tournament = _tournament(8)
    tournament.start()
    match = tournament.generate_next_round().matches[0]

    with pytest.raises(InvalidResultException):
        tournament.record_match_score(match.id, 21, 21)
    with pytest.raises(InvalidResultException):
        tournament.record_match_score(match.id, -1, 21)
    with pytest.raises(MatchNotFoundException):
        tournament.record_match_score("match-nope", 21, 10)
    assert not match.is_completed


def test_round_needs_every_score_before_completion():
    tournament = _tournament(8)
    tournament.start()
    match = tournament.generate_next_round().matches[0]
    tournament.record_match_score(match.id, 21, 19)

    with pytest.raises(TournamentStateException):
        tournament.complete_round()
    assert tournament.current_round == 1


def test_round_is_generated_once():
    tournament = _tournament(8)
    tournament.start()
    tournament.generate_next_round()

    with pytest.raises(TournamentStateException, match="in progress"):
        tournament.generate_next_round()


def test_undo_last_round():
    tournament = _tournament(8)
    tournament.start()

    with pytest.raises(RoundNotFoundException):
        tournament.undo_last_round()

    tournament.generate_next_round()
    undone = tournament.undo_last_round()
    assert undone.round_number == 1
    assert tournament.rounds == []

    _play_round(tournament)
    with pytest.raises(TournamentStateException):
        tournament.undo_last_round()


def test_complete_round_needs_a_round():
    tournament = _tournament(8)
    tournament.start()
    with pytest.raises(RoundNotFoundException):
        tournament.complete_round()


def test_withdrawn_player_keeps_results_and_sits_out():
    tournament = _tournament(9)
    tournament.start()
    _play_round(tournament, seed=1)

    leaver = tournament.get_player_list()[0]
    score = leaver.score
    tournament.remove_player(leaver.id)

    assert not leaver.is_active
    assert leaver.removed_in_round == 2
    assert leaver in tournament.get_leaderboard()

    result, _ = _play_round(tournament, seed=2)
    paired = {pid for m in result.matches for pid in m.player_ids}
    assert leaver.id not in paired
    assert leaver.id not in result.byes
    assert leaver.score == score


def test_remove_player_before_start_deletes():
    tournament = _tournament(8)
    player = tournament.get_player_list()[0]
    tournament.remove_player(player.id)

    assert len(tournament.players) == 7
    with pytest.raises(PlayerNotFoundException):
        tournament.get_player(player.id)


def test_leaderboard_and_stats():
    tournament = _tournament(8)
    tournament.start()
    result, _ = _play_round(tournament)

    leaderboard = tournament.get_leaderboard()
    assert [p.score for p in leaderboard] == sorted(
        (p.score for p in leaderboard), reverse=True
    )

    winner_id = result.matches[0].team1.player1_id
    stats = tournament.get_player_stats(winner_id)
    assert stats.games_played == 1
    assert stats.win_percentage == 1.0
    assert stats.points_per_game == 3.0
    assert stats.strength_of_schedule == 0.0
    assert stats.rank <= 4

    with pytest.raises(PlayerNotFoundException):
        tournament.get_player_stats("player-missing")


def test_group_configuration_preview():
    tournament = _tournament(22, grouping_mode="mixed")
    config = tournament.group_configuration()
    assert (config.byes, config.groups_of_8, config.groups_of_12) == (2, 1, 1)


def test_serialization_round_trip():
    tournament = _tournament(10)
    tournament.start()
    _play_round(tournament)
    tournament.generate_next_round(rng=random.Random(3))

    restored = Tournament.from_dict(tournament.to_dict())

    assert restored.current_round == 2
    assert restored.is_started
    assert restored.group_config == tournament.group_config
    assert [r.to_dict() for r in restored.rounds] == [
        r.to_dict() for r in tournament.rounds
    ]
    for player in tournament.get_player_list():
        copy = restored.get_player(player.id)
        assert copy.score == player.score
        assert copy.previous_teammates == player.previous_teammates
        assert copy.bye_history == player.bye_history


def test_non_finite_scores_are_rejected():
    tournament = _tournament(8)
    tournament.start()
    match = tournament.generate_next_round().matches[0]

    with pytest.raises(InvalidResultException):
        tournament.record_match_score(match.id, float("nan"), float("nan"))
    with pytest.raises(InvalidResultException):
        tournament.record_match_score(match.id, float("inf"), 15)
    assert not match.is_completed


def test_add_player_without_name():
    tournament = Tournament()
    with pytest.raises(InvalidPlayerDataException):
        tournament.add_player(None)
    assert tournament.players == {}
