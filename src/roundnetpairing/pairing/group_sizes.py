"""Group size solver.

Works out how many players sit out a round and how the rest split into
groups of 4, 8 or 12. Three policies are supported:

- fixed4: groups of four only, ``n % 4`` byes.
- mixed: groups of eight and twelve. The active count is a multiple of
  four, so with ``target = active / 4`` we solve ``2*A + 3*B = target``
  for A groups of 8 and B groups of 12.
- custom: the organizer names the group counts; byes are whatever is left.
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

from typing import List, Optional, Tuple

from roundnetpairing.constants import (
    DEFAULT_GROUPING_MODE,
    GROUP_SIZE_4,
    MODE_FIXED_4,
    MODE_MIXED,
)
from roundnetpairing.exceptions import InvalidConfigurationException
from roundnetpairing.models import CustomGroupConfiguration, GroupConfiguration
from roundnetpairing.utils import setup_logger
from roundnetpairing.utils.validation import (
    validate_custom_groups_strict,
    validate_player_count_strict,
)

logger = setup_logger(__name__)


def solve_mixed_groups(target: int, prefer_larger: bool) -> Optional[Tuple[int, int]]:
    """Solve ``2*A + 3*B == target`` in non-negative integers.

    Args:
        target: Active players divided by four
        prefer_larger: Maximize B (groups of 12) instead of A (groups of 8)

    Returns:
        ``(groups_of_8, groups_of_12)`` or None if there is no solution
    """
    solutions: List[Tuple[int, int]] = []
    for groups_of_12 in range(target // 3 + 1):
        remainder = target - 3 * groups_of_12
        if remainder >= 0 and remainder % 2 == 0:
            solutions.append((remainder // 2, groups_of_12))

    if not solutions:
        return None

    if prefer_larger:
        return max(solutions, key=lambda s: s[1])
    return max(solutions, key=lambda s: s[0])


def calculate_groups(
    total_players: int,
    mode: str = DEFAULT_GROUPING_MODE,
    prefer_larger: bool = True,
    custom: Optional[CustomGroupConfiguration] = None,
) -> GroupConfiguration:
    """Compute byes and group counts for ``total_players``.

    Custom counts are taken as given; check them with
    ``validate_custom_groups`` first. In mixed mode a player count with
    no solution yields zero groups, which the caller must treat as failure.

    Args:
        total_players: Players available for the round
        mode: "fixed4" or "mixed"
        prefer_larger: Mixed mode only, see ``solve_mixed_groups``
        custom: Explicit group counts, overriding ``mode``

    Returns:
        GroupConfiguration for the round
    """
    if custom is not None and custom.use_custom_groups:
        active = custom.active_players
        return GroupConfiguration(
            total_players=total_players,
            byes=total_players - active,
            active_players_per_round=active,
            groups_of_4=custom.groups_of_4,
            groups_of_8=custom.groups_of_8,
            groups_of_12=custom.groups_of_12,
            total_groups=custom.groups_of_4 + custom.groups_of_8 + custom.groups_of_12,
        )

    byes = total_players % GROUP_SIZE_4
    active = total_players - byes

    if mode == MODE_FIXED_4:
        groups_of_4 = active // GROUP_SIZE_4
        return GroupConfiguration(
            total_players=total_players,
            byes=byes,
            active_players_per_round=active,
            groups_of_4=groups_of_4,
            total_groups=groups_of_4,
        )

    if mode == MODE_MIXED:
        solution = solve_mixed_groups(active // GROUP_SIZE_4, prefer_larger)
        if solution is None:
            logger.debug("No 8/12 split exists for %s active players", active)
            return GroupConfiguration(
                total_players=total_players,
                byes=byes,
                active_players_per_round=active,
            )
        groups_of_8, groups_of_12 = solution
        return GroupConfiguration(
            total_players=total_players,
            byes=byes,
            active_players_per_round=active,
            groups_of_8=groups_of_8,
            groups_of_12=groups_of_12,
            total_groups=groups_of_8 + groups_of_12,
        )

    raise InvalidConfigurationException(f"Unknown grouping mode: {mode!r}")


def preview_group_configuration(
    total_players: int,
    mode: str = DEFAULT_GROUPING_MODE,
    custom: Optional[CustomGroupConfiguration] = None,
    prefer_larger: bool = True,
) -> GroupConfiguration:
    """Validate the roster size and return the group layout it would get.

    Raises:
        PlayerCountValidationException: If the player count is out of bounds
        GroupConfigurationException: If custom counts do not fit the roster
    """
    validate_player_count_strict(total_players, mode)
    if custom is not None and custom.use_custom_groups:
        validate_custom_groups_strict(
            total_players, custom.groups_of_4, custom.groups_of_8, custom.groups_of_12
        )
    return calculate_groups(total_players, mode, prefer_larger, custom)
