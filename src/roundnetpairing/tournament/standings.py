"""Leaderboard and per-player statistics."""

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

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from roundnetpairing.exceptions import PlayerNotFoundException
from roundnetpairing.models import RoundData
from roundnetpairing.pairing.grouping import (
    strength_of_schedule,
    strength_of_schedule_map,
)
from roundnetpairing.player import Player

__all__ = [
    "PlayerStats",
    "get_leaderboard",
    "get_player_stats",
    "strength_of_schedule",
]


@dataclass
class PlayerStats:
    """Summary numbers for one player."""

    current_score: float
    games_played: int
    win_percentage: float  # 0.0 - 1.0
    points_per_game: float
    strength_of_schedule: float
    rank: int  # 1-based leaderboard position

    def to_dict(self) -> Dict[str, Any]:
        return {
            "current_score": self.current_score,
            "games_played": self.games_played,
            "win_percentage": self.win_percentage,
            "points_per_game": self.points_per_game,
            "strength_of_schedule": self.strength_of_schedule,
            "rank": self.rank,
        }


def get_leaderboard(
    players: Sequence[Player], rounds: Sequence[RoundData]
) -> List[Player]:
    """Sort players for display: score, then strength of schedule, then name.

    Withdrawn players stay on the board with the points they earned.
    """
    players_by_id = {p.id: p for p in players}
    sos = strength_of_schedule_map(players, rounds, players_by_id)
    return sorted(
        players,
        key=lambda p: (-p.score, -sos[p.id], p.name.casefold(), p.id),
    )


def get_player_stats(
    player_id: str, players: Sequence[Player], rounds: Sequence[RoundData]
) -> PlayerStats:
    """Compute statistics for one player.

    Raises:
        PlayerNotFoundException: If no player has ``player_id``
    """
    players_by_id = {p.id: p for p in players}
    player = players_by_id.get(player_id)
    if player is None:
        raise PlayerNotFoundException(f"Player {player_id} not found")

    leaderboard = get_leaderboard(players, rounds)
    rank = next(i for i, p in enumerate(leaderboard, start=1) if p.id == player_id)

    games = player.games_played
    return PlayerStats(
        current_score=player.score,
        games_played=games,
        win_percentage=player.wins / games if games else 0.0,
        points_per_game=player.score / games if games else 0.0,
        strength_of_schedule=strength_of_schedule(player, rounds, players_by_id),
        rank=rank,
    )
