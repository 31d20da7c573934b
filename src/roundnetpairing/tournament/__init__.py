"""Tournament management for Roundnet Pairing.

The pairing engine is stateless; this package owns a tournament's roster
and rounds, records scores and keeps the standings.
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

from roundnetpairing.tournament.result_recorder import ResultRecorder
from roundnetpairing.tournament.round_manager import RoundManager
from roundnetpairing.tournament.standings import (
    PlayerStats,
    get_leaderboard,
    get_player_stats,
)
from roundnetpairing.tournament.tournament import Tournament

__all__ = [
    "Tournament",
    "RoundManager",
    "ResultRecorder",
    "PlayerStats",
    "get_leaderboard",
    "get_player_stats",
]
