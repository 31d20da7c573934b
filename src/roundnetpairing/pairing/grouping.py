"""Ranking and grouping of the players who are not on a bye."""

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

from collections import defaultdict
from typing import Dict, List, Mapping, Optional, Sequence

from roundnetpairing.exceptions import InvalidPairingException
from roundnetpairing.models import GroupConfiguration, RoundData
from roundnetpairing.player import Player
from roundnetpairing.type_hints import Groups
from roundnetpairing.utils import setup_logger

logger = setup_logger(__name__)


def _opponents_by_player(rounds: Sequence[RoundData]) -> Dict[str, List[str]]:
    """Map each player id to every opponent faced in completed matches."""
    opponents: Dict[str, List[str]] = defaultdict(list)
    for round_data in rounds:
        if not round_data.is_completed:
            continue
        for match in round_data.matches:
            if not match.is_completed:
                continue
            for player_id in match.team1.player_ids:
                opponents[player_id].extend(match.team2.player_ids)
            for player_id in match.team2.player_ids:
                opponents[player_id].extend(match.team1.player_ids)
    return opponents


def _average_score(
    opponent_ids: List[str], players_by_id: Mapping[str, Player]
) -> float:
    if not opponent_ids:
        return 0.0
    total = 0.0
    for opponent_id in opponent_ids:
        opponent = players_by_id.get(opponent_id)
        total += opponent.score if opponent else 0.0
    return total / len(opponent_ids)


def strength_of_schedule(
    player: Player,
    rounds: Sequence[RoundData],
    players_by_id: Mapping[str, Player],
) -> float:
    """Average current score of every opponent faced in completed matches.

    Opponents missing from ``players_by_id`` count as 0. A player who has
    not finished a match yet has a strength of schedule of 0.
    """
    opponents = _opponents_by_player(rounds).get(player.id, [])
    return _average_score(opponents, players_by_id)


def strength_of_schedule_map(
    players: Sequence[Player],
    rounds: Sequence[RoundData],
    players_by_id: Mapping[str, Player],
) -> Dict[str, float]:
    """Strength of schedule for many players with one pass over the rounds."""
    opponents = _opponents_by_player(rounds)
    return {
        player.id: _average_score(opponents.get(player.id, []), players_by_id)
        for player in players
    }


def rank_players(
    players: Sequence[Player],
    rounds: Optional[Sequence[RoundData]] = None,
    players_by_id: Optional[Mapping[str, Player]] = None,
) -> List[Player]:
    """Sort players best first.

    Order: score (desc), strength of schedule (desc), initial skill
    rating (desc), name, id. The skill rating is a seeding aid only: once a
    round has been completed it no longer breaks ties.

    Args:
        players: Players to rank
        rounds: Tournament rounds so far, used for strength of schedule
        players_by_id: Lookup for opponent scores; defaults to ``players``
    """
    if players_by_id is None:
        players_by_id = {p.id: p for p in players}
    rounds = rounds or []
    sos = strength_of_schedule_map(players, rounds, players_by_id)
    seeding = not any(r.is_completed for r in rounds)

    return sorted(
        players,
        key=lambda p: (
            -p.score,
            -sos[p.id],
            -p.seed_rating if seeding else 0,
            p.name.casefold(),
            p.id,
        ),
    )


def create_groups(
    players: Sequence[Player],
    group_config: GroupConfiguration,
    rounds: Optional[Sequence[RoundData]] = None,
    players_by_id: Optional[Mapping[str, Player]] = None,
) -> Groups:
    """Rank players and slice them into groups.

    Groups of 4 are filled first, then 8, then 12, each taking the next
    best-ranked players.

    Returns:
        Groups in fill order, each listed best player first

    Raises:
        InvalidPairingException: If the group sizes do not add up to the
            number of players given
    """
    sizes = group_config.group_sizes
    if sum(sizes) != len(players):
        raise InvalidPairingException(
            f"Group sizes {sizes} do not cover {len(players)} players"
        )

    ranked = rank_players(players, rounds, players_by_id)

    groups: Groups = []
    index = 0
    for size in sizes:
        groups.append(ranked[index : index + size])
        index += size

    logger.debug(
        "Built %s groups: %s", len(groups), [len(group) for group in groups]
    )
    return groups
