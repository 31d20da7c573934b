"""Group size configuration models."""

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
from typing import Any, Dict, List

from roundnetpairing.constants import GROUP_SIZE_4, GROUP_SIZE_8, GROUP_SIZE_12


@dataclass
class GroupConfiguration:
    """How a round splits the players into byes and groups.

    ``groups_of_4 * 4 + groups_of_8 * 8 + groups_of_12 * 12`` always equals
    ``active_players_per_round``, and ``active_players_per_round + byes``
    equals ``total_players``.
    """

    total_players: int
    byes: int
    active_players_per_round: int
    groups_of_4: int = 0
    groups_of_8: int = 0
    groups_of_12: int = 0
    total_groups: int = 0

    @property
    def group_counts(self) -> Dict[int, int]:
        """Number of groups per size, smallest size first."""
        return {
            GROUP_SIZE_4: self.groups_of_4,
            GROUP_SIZE_8: self.groups_of_8,
            GROUP_SIZE_12: self.groups_of_12,
        }

    @property
    def group_sizes(self) -> List[int]:
        """Size of every group in the order they are filled."""
        sizes = []
        for size, count in self.group_counts.items():
            sizes.extend([size] * count)
        return sizes

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_players": self.total_players,
            "byes": self.byes,
            "active_players_per_round": self.active_players_per_round,
            "groups_of_4": self.groups_of_4,
            "groups_of_8": self.groups_of_8,
            "groups_of_12": self.groups_of_12,
            "total_groups": self.total_groups,
        }


@dataclass
class CustomGroupConfiguration:
    """Explicit group counts chosen by the organizer."""

    groups_of_4: int = 0
    groups_of_8: int = 0
    groups_of_12: int = 0
    use_custom_groups: bool = True

    @property
    def active_players(self) -> int:
        return (
            self.groups_of_4 * GROUP_SIZE_4
            + self.groups_of_8 * GROUP_SIZE_8
            + self.groups_of_12 * GROUP_SIZE_12
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "use_custom_groups": self.use_custom_groups,
            "groups_of_4": self.groups_of_4,
            "groups_of_8": self.groups_of_8,
            "groups_of_12": self.groups_of_12,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CustomGroupConfiguration":
        return cls(
            groups_of_4=data.get("groups_of_4", 0),
            groups_of_8=data.get("groups_of_8", 0),
            groups_of_12=data.get("groups_of_12", 0),
            use_custom_groups=data.get("use_custom_groups", True),
        )
