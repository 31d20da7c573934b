"""Pairing engine for Roundnet Pairing.

Each step of building a round lives in its own module; ``generate_round``
runs them in order.
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

from roundnetpairing.pairing.byes import assign_byes
from roundnetpairing.pairing.diagnostics import debug_round, validate_round_result
from roundnetpairing.pairing.group_sizes import (
    calculate_groups,
    preview_group_configuration,
)
from roundnetpairing.pairing.grouping import (
    create_groups,
    rank_players,
    strength_of_schedule,
)
from roundnetpairing.pairing.matches import (
    find_best_match_set,
    generate_all_match_sets,
    select_matches,
)
from roundnetpairing.pairing.round_generator import generate_round
from roundnetpairing.pairing.teams import (
    find_best_team_set,
    generate_all_team_sets,
    select_teams,
)

__all__ = [
    "assign_byes",
    "calculate_groups",
    "create_groups",
    "debug_round",
    "find_best_match_set",
    "find_best_team_set",
    "generate_all_match_sets",
    "generate_all_team_sets",
    "generate_round",
    "preview_group_configuration",
    "rank_players",
    "select_matches",
    "select_teams",
    "strength_of_schedule",
    "validate_round_result",
]
