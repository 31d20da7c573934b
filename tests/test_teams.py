import pytest

from roundnetpairing.exceptions import (
    GroupTooLargeException,
    NoPairingAvailableException,
    OddGroupSizeException,
)
from roundnetpairing.pairing import (
    find_best_team_set,
    generate_all_team_sets,
    select_teams,
)
from roundnetpairing.pairing.enumeration import (
    count_perfect_matchings,
    iter_perfect_matchings,
)


@pytest.mark.parametrize("size, expected", [(4, 3), (8, 105)])
def test_every_split_is_enumerated(make_players, size, expected):
    players = make_players(size)
    team_sets = generate_all_team_sets(players)

    assert len(team_sets) == expected
    assert len({frozenset(t.key for t in s) for s in team_sets}) == expected
    for team_set in team_sets:
        ids = [pid for team in team_set for pid in team.player_ids]
        assert sorted(ids) == sorted(p.id for p in players)


def test_group_of_twelve_has_10395_splits():
    assert count_perfect_matchings(12) == 10395
    assert sum(1 for _ in iter_perfect_matchings(12)) == 10395


def test_odd_group_raises(make_players):
    with pytest.raises(OddGroupSizeException):
        generate_all_team_sets(make_players(5))


def test_oversized_group_raises(make_players):
    with pytest.raises(GroupTooLargeException):
        generate_all_team_sets(make_players(14))


def test_most_balanced_split_wins(make_player):
    a, b, c, d = (make_player(score=s) for s in (9, 6, 3, 0))
    selection = select_teams([a, b, c, d])

    assert {t.key for t in selection.teams} == {
        frozenset({a.id, d.id}),
        frozenset({b.id, c.id}),
    }
    assert selection.repeat_partner_count == 0
    assert selection.score_difference == 0


def test_fresh_partners_beat_balance(make_player):
    a, b, c, d = (make_player(score=s) for s in (9, 6, 3, 0))
    a.previous_teammates.append(d.id)
    d.previous_teammates.append(a.id)

    selection = select_teams([a, b, c, d])

    assert {t.key for t in selection.teams} == {
        frozenset({a.id, c.id}),
        frozenset({b.id, d.id}),
    }
    assert selection.repeat_partner_count == 0
    assert selection.score_difference == 6


def test_first_enumerated_split_wins_ties(make_players):
    players = make_players(4)
    selection = select_teams(players)

    assert selection.teams[0].player_ids == (players[0].id, players[1].id)


def test_unavoidable_repeat_is_counted(make_players):
    players = make_players(4)
    for p in players:
        p.previous_teammates.extend(o.id for o in players if o is not p)

    selection = select_teams(players)
    assert selection.repeat_partner_count == 2


def test_team_combined_score(make_player):
    a = make_player(score=4.5)
    b = make_player(score=3)
    team = generate_all_team_sets([a, b])[0][0]
    assert team.combined_score == 7.5
    assert team.partner_of(a.id) == b.id


def test_empty_choice_raises():
    with pytest.raises(NoPairingAvailableException):
        find_best_team_set([], [])
