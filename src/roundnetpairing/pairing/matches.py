"""Match generation from a group's teams.

Every way of pairing the teams into matches is scored; the set with the
fewest repeat opponents wins, then the one with the smallest total score
gap across its matches.
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

from typing import Iterable, Iterator, List, Sequence

from roundnetpairing.exceptions import NoPairingAvailableException
from roundnetpairing.models import Match, MatchSelection, Team
from roundnetpairing.pairing.enumeration import check_pairable, iter_perfect_matchings
from roundnetpairing.pairing.teams import PlayerLookup, as_player_lookup
from roundnetpairing.type_hints import MatchSet
from roundnetpairing.utils import setup_logger

logger = setup_logger(__name__)


def iter_match_sets(teams: Sequence[Team], round_number: int) -> Iterator[MatchSet]:
    """Lazily yield every way to pair ``teams`` into matches.

    Raises:
        OddGroupSizeException: If there is an odd number of teams
    """
    check_pairable(len(teams), "teams")
    for pairs in iter_perfect_matchings(len(teams)):
        yield [
            Match(round_number=round_number, team1=teams[i], team2=teams[j])
            for i, j in pairs
        ]


def generate_all_match_sets(
    teams: Sequence[Team], round_number: int
) -> List[MatchSet]:
    """Return every way to pair ``teams`` into matches for ``round_number``."""
    return list(iter_match_sets(teams, round_number))


def count_repeat_opponents(matches: Iterable[Match], players: PlayerLookup) -> int:
    """Count (team 1 member, team 2 member) pairs that have met before.

    Each pair counts once, looked up in the team 1 member's opponent history.
    """
    lookup = as_player_lookup(players)
    repeat_count = 0
    for match in matches:
        for player_id in match.team1.player_ids:
            player = lookup.get(player_id)
            if player is None:
                continue
            for opponent_id in match.team2.player_ids:
                if player.has_faced(opponent_id):
                    repeat_count += 1
    return repeat_count


def match_set_score_difference(matches: Iterable[Match]) -> float:
    """Sum of the combined-score gaps of all matches."""
    return sum(match.score_gap for match in matches)


def find_best_match_set(
    match_sets: Iterable[MatchSet], players: PlayerLookup
) -> MatchSelection:
    """Pick the match set with fewest repeat opponents, then smallest gap.

    On an exact tie the set enumerated first is kept.

    Raises:
        NoPairingAvailableException: If ``match_sets`` is empty
    """
    lookup = dict(as_player_lookup(players))
    best_matches = None
    best_repeats = 0
    best_difference = 0.0

    for match_set in match_sets:
        repeats = count_repeat_opponents(match_set, lookup)
        if best_matches is not None and repeats > best_repeats:
            continue
        difference = match_set_score_difference(match_set)
        if (
            best_matches is None
            or repeats < best_repeats
            or difference < best_difference
        ):
            best_matches, best_repeats, best_difference = (
                match_set,
                repeats,
                difference,
            )

    if best_matches is None:
        raise NoPairingAvailableException("No match combinations to choose from")

    return MatchSelection(
        matches=best_matches,
        repeat_opponent_count=best_repeats,
        total_score_difference=best_difference,
    )


def select_matches(
    teams: Sequence[Team], players: PlayerLookup, round_number: int
) -> MatchSelection:
    """Enumerate and choose the best matches for one group's teams."""
    selection = find_best_match_set(iter_match_sets(teams, round_number), players)
    logger.debug(
        "%s teams: %s repeat opponents, total gap %.2f",
        len(teams),
        selection.repeat_opponent_count,
        selection.total_score_difference,
    )
    return selection
