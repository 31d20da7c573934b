"""Team generation for a single group.

Every way of splitting the group into 2-player teams is scored and the
split with the fewest repeat partnerships wins; among those, the one with
the smallest gap between the strongest and weakest team.
"""

# Roundnet Pairing
# Copyright (C) 2025  Roundnet Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Dict, Iterable, Iterator, List, Mapping, Sequence, Union

from roundnetpairing.exceptions import NoPairingAvailableException
from roundnetpairing.models import Team, TeamSelection
from roundnetpairing.pairing.enumeration import check_pairable, iter_perfect_matchings
from roundnetpairing.player import Player
from roundnetpairing.type_hints import TeamSet
from roundnetpairing.utils import setup_logger

logger = setup_logger(__name__)

PlayerLookup = Union[Sequence[Player], Mapping[str, Player]]


def as_player_lookup(players: PlayerLookup) -> Mapping[str, Player]:
    """Index players by id unless they already are."""
    if isinstance(players, Mapping):
        return players
    return {p.id: p for p in players}


def make_team(player1: Player, player2: Player) -> Team:
    """Build a team from two players, scoring it by their current scores."""
    return Team(
        player1_id=player1.id,
        player2_id=player2.id,
        combined_score=player1.score + player2.score,
    )


def iter_team_sets(players: Sequence[Player]) -> Iterator[TeamSet]:
    """Lazily yield every split of ``players`` into teams of two.

    Raises:
        OddGroupSizeException: If the group has an odd number of players
        GroupTooLargeException: If the group is larger than 12
    """
    check_pairable(len(players), "players")
    for pairs in iter_perfect_matchings(len(players)):
        yield [make_team(players[i], players[j]) for i, j in pairs]


def generate_all_team_sets(players: Sequence[Player]) -> List[TeamSet]:
    """Return every split of ``players`` into teams of two.

    A group of k players has (k - 1)!! splits: 3 for 4 players, 105 for 8
    and 10395 for 12.
    """
    return list(iter_team_sets(players))


def count_repeat_partners(teams: Iterable[Team], players: PlayerLookup) -> int:
    """Count teams whose two members have partnered before."""
    lookup = as_player_lookup(players)
    repeat_count = 0
    for team in teams:
        player1 = lookup.get(team.player1_id)
        player2 = lookup.get(team.player2_id)
        if player1 is None or player2 is None:
            continue
        if player1.has_partnered(player2.id) or player2.has_partnered(player1.id):
            repeat_count += 1
    return repeat_count


def team_score_spread(teams: Sequence[Team]) -> float:
    """Difference between the highest and lowest combined team score."""
    if not teams:
        return 0.0
    scores = [team.combined_score for team in teams]
    return max(scores) - min(scores)


def find_best_team_set(
    team_sets: Iterable[TeamSet], players: PlayerLookup
) -> TeamSelection:
    """Pick the team split with fewest repeat partners, then smallest spread.

    On an exact tie the split enumerated first is kept.

    Raises:
        NoPairingAvailableException: If ``team_sets`` is empty
    """
    lookup: Dict[str, Player] = dict(as_player_lookup(players))
    best_teams = None
    best_repeats = 0
    best_spread = 0.0

    for team_set in team_sets:
        repeats = count_repeat_partners(team_set, lookup)
        if best_teams is not None and repeats > best_repeats:
            continue
        spread = team_score_spread(team_set)
        if (
            best_teams is None
            or repeats < best_repeats
            or spread < best_spread
        ):
            best_teams, best_repeats, best_spread = team_set, repeats, spread

    if best_teams is None:
        raise NoPairingAvailableException("No team combinations to choose from")

    scores = [team.combined_score for team in best_teams] or [0.0]
    return TeamSelection(
        teams=best_teams,
        repeat_partner_count=best_repeats,
        max_team_score=max(scores),
        min_team_score=min(scores),
    )


def select_teams(group: Sequence[Player]) -> TeamSelection:
    """Enumerate and choose the best teams for one group."""
    selection = find_best_team_set(iter_team_sets(group), group)
    logger.debug(
        "Group of %s: %s repeat partners, spread %.2f",
        len(group),
        selection.repeat_partner_count,
        selection.score_difference,
    )
    return selection
