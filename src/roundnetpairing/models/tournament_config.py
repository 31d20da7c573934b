"""Tournament configuration model."""

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
from typing import Any, Dict, Optional

from roundnetpairing.constants import (
    DEFAULT_BYE_POINTS,
    DEFAULT_GROUPING_MODE,
    DEFAULT_SCORING_SYSTEM,
    MAX_PLAYERS,
    MODE_FIXED_4,
    MODE_MIXED,
    SCORING_WIN_LOSS,
    SCORING_WIN_LOSS_BONUS,
)
from roundnetpairing.exceptions import InvalidConfigurationException
from roundnetpairing.models.group_config import CustomGroupConfiguration


@dataclass
class TournamentConfig:
    """Configuration settings for a tournament.

    Attributes:
        name: Tournament name
        description: Optional free text
        max_players: Roster limit, defaults to the grouping mode's bound
        scoring_system: 'win-loss' or 'win-loss-bonus'
        bonus_points_enabled: Award the share-of-points bonus
        bye_points: Points awarded for a bye
        grouping_mode: 'fixed4' (groups of 4) or 'mixed' (groups of 8 and 12)
        prefer_larger_groups: In mixed mode, favour groups of 12 over 8
        custom_groups: Explicit group counts overriding the grouping mode
    """

    name: str = "Untitled Tournament"
    description: Optional[str] = None
    max_players: Optional[int] = None
    scoring_system: str = DEFAULT_SCORING_SYSTEM
    bonus_points_enabled: bool = False
    bye_points: float = DEFAULT_BYE_POINTS
    grouping_mode: str = DEFAULT_GROUPING_MODE
    prefer_larger_groups: bool = True
    custom_groups: Optional[CustomGroupConfiguration] = None

    def __post_init__(self) -> None:
        if self.scoring_system not in (SCORING_WIN_LOSS, SCORING_WIN_LOSS_BONUS):
            raise InvalidConfigurationException(
                f"Unknown scoring system: {self.scoring_system!r}"
            )
        if self.grouping_mode not in (MODE_FIXED_4, MODE_MIXED):
            raise InvalidConfigurationException(
                f"Unknown grouping mode: {self.grouping_mode!r}"
            )
        if self.max_players is None:
            self.max_players = MAX_PLAYERS[self.grouping_mode]
        if self.bye_points < 0:
            raise InvalidConfigurationException(
                f"Bye points cannot be negative: {self.bye_points}"
            )

    @property
    def uses_bonus_points(self) -> bool:
        return (
            self.scoring_system == SCORING_WIN_LOSS_BONUS and self.bonus_points_enabled
        )

    @property
    def active_custom_groups(self) -> Optional[CustomGroupConfiguration]:
        """Custom groups if they are switched on, otherwise None."""
        if self.custom_groups and self.custom_groups.use_custom_groups:
            return self.custom_groups
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "description": self.description,
            "max_players": self.max_players,
            "scoring_system": self.scoring_system,
            "bonus_points_enabled": self.bonus_points_enabled,
            "bye_points": self.bye_points,
            "grouping_mode": self.grouping_mode,
            "prefer_larger_groups": self.prefer_larger_groups,
            "custom_groups": (
                self.custom_groups.to_dict() if self.custom_groups else None
            ),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary.

        Older snapshots without ``bye_points`` get the default of 3.
        """
        custom = data.get("custom_groups")
        return cls(
            name=data.get("name", "Untitled Tournament"),
            description=data.get("description"),
            max_players=data.get("max_players"),
            scoring_system=data.get("scoring_system", DEFAULT_SCORING_SYSTEM),
            bonus_points_enabled=data.get("bonus_points_enabled", False),
            bye_points=data.get("bye_points", DEFAULT_BYE_POINTS),
            grouping_mode=data.get("grouping_mode", DEFAULT_GROUPING_MODE),
            prefer_larger_groups=data.get("prefer_larger_groups", True),
            custom_groups=(
                CustomGroupConfiguration.from_dict(custom) if custom else None
            ),
        )
