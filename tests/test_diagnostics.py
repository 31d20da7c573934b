import random

import pytest

from roundnetpairing.exceptions import InvalidPairingException
from roundnetpairing.models import PairingResult
from roundnetpairing.pairing import debug_round, generate_round, validate_round_result
from roundnetpairing.pairing.diagnostics import format_diagnostics


def test_debug_round_reports_byes_and_matches(make_players):
    players = make_players(10)
    result = generate_round(players, 1, rng=random.Random(2))

    diagnostics = debug_round(players, result)

    assert diagnostics.round_number == 1
    assert diagnostics.player_count == 10
    assert diagnostics.group_configuration["byes"] == 2
    assert diagnostics.group_configuration["groups_of_4"] == 2
    assert len(diagnostics.bye_assignments) == 2
    assert len(diagnostics.matches) == 2
    assert diagnostics.total_repeat_partnerships == 0
    assert diagnostics.to_dict()["stats"]["max_score_gap"] == 0


def test_debug_round_counts_repeats(make_players):
    players = make_players(4)
    for p in players:
        others = [o.id for o in players if o is not p]
        p.previous_teammates.extend(others)
        p.previous_opponents.extend(others)

    diagnostics = debug_round(players, generate_round(players, 5))

    assert diagnostics.total_repeat_partnerships == 2
    assert diagnostics.total_repeat_opponents == 4
    assert diagnostics.matches[0].has_repeat_opponents


def test_score_gap_statistics(make_player):
    players = [make_player(score=s) for s in (9, 9, 0, 0, 3, 3, 3, 3)]
    diagnostics = debug_round(players, generate_round(players, 2))

    assert diagnostics.max_score_gap == pytest.approx(diagnostics.average_score_gap)


def test_debug_round_rejects_failed_result():
    with pytest.raises(InvalidPairingException):
        debug_round([], PairingResult.failure(1, ["boom"]))


def test_format_diagnostics(make_players):
    players = make_players(9)
    text = format_diagnostics(
        debug_round(players, generate_round(players, 1, rng=random.Random(0)))
    )

    assert text.startswith("=== ROUND 1 DIAGNOSTICS ===")
    assert "Bye assignments:" in text
    assert "Match 2:" in text
    assert "Total repeat partnerships: 0" in text


def test_valid_round_has_no_problems(make_player):
    players = [make_player() for _ in range(14)] + [make_player(is_active=False)]
    result = generate_round(players, 1, rng=random.Random(4))

    assert validate_round_result(players, result) == []


def test_failed_round_is_a_problem():
    assert validate_round_result([], PairingResult.failure(1, ["x"])) == [
        "Round generation failed"
    ]


def test_duplicate_player_is_reported(make_players):
    players = make_players(8)
    result = generate_round(players, 1)
    result.byes.append(result.matches[0].team1.player1_id)

    problems = validate_round_result(players, result)

    assert any("appears 2 times" in problem for problem in problems)
    assert any(problem.startswith("Player count mismatch") for problem in problems)


def test_inactive_player_in_round_is_reported(make_players):
    players = make_players(8)
    result = generate_round(players, 1)
    players[0].deactivate(1)

    problems = validate_round_result(players, result)

    assert f"Inactive player {players[0].id} was paired" in problems
