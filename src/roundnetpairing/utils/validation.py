"""Validation utilities for Roundnet Pairing.

Each check comes in two flavours: ``validate_*`` returns a ``ValidationResult``
for callers that want to show the message, ``validate_*_strict`` raises.
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

from typing import Optional, Union

from roundnetpairing.constants import (
    DEFAULT_GROUPING_MODE,
    GROUP_SIZE_4,
    GROUP_SIZE_8,
    GROUP_SIZE_12,
    MAX_BYES,
    MAX_PLAYERS,
    MAX_SKILL_RATING,
    MIN_PLAYERS,
    MIN_SKILL_RATING,
)
from roundnetpairing.exceptions import (
    GroupConfigurationException,
    InvalidConfigurationException,
    PlayerCountValidationException,
    SkillRatingValidationException,
)


class ValidationResult:
    """Outcome of one check.

    Attributes:
        is_valid: True when the input passed
        error_message: Message shown to the organiser when it did not
        sanitized_value: Cleaned/normalized value (or derived count) if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Union[str, int, None] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Player Count Validation ==========


def max_players_for_mode(mode: str) -> int:
    """Return the player limit for a grouping mode.

    Raises:
        InvalidConfigurationException: If the mode is unknown
    """
    try:
        return MAX_PLAYERS[mode]
    except KeyError:
        raise InvalidConfigurationException(f"Unknown grouping mode: {mode!r}")


def validate_player_count(
    player_count: int, mode: str = DEFAULT_GROUPING_MODE
) -> ValidationResult:
    """Validate the number of registered players for a grouping mode.

    Args:
        player_count: Number of players in the tournament
        mode: Grouping mode ("fixed4" allows up to 40, "mixed" up to 30)

    Returns:
        ValidationResult whose message states the violated bound

    Example:
        >>> validate_player_count(7).error_message
        'Need at least 8 players (currently have 7)'
    """
    maximum = max_players_for_mode(mode)

    if player_count < MIN_PLAYERS:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Need at least {MIN_PLAYERS} players "
                f"(currently have {player_count})"
            ),
        )

    if player_count > maximum:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Maximum {maximum} players allowed "
                f"(currently have {player_count})"
            ),
        )

    return ValidationResult(is_valid=True, sanitized_value=player_count)


def validate_player_count_strict(
    player_count: int, mode: str = DEFAULT_GROUPING_MODE
) -> None:
    """Validate player count and raise exception if invalid.

    Raises:
        PlayerCountValidationException: If the count is out of bounds
    """
    result = validate_player_count(player_count, mode)
    if not result.is_valid:
        raise PlayerCountValidationException(result.error_message)


# ========== Custom Group Validation ==========


def validate_custom_groups(
    total_players: int,
    groups_of_4: int,
    groups_of_8: int,
    groups_of_12: int,
) -> ValidationResult:
    """Validate explicit group counts against the number of players.

    The groups must not need more players than exist, and may leave at
    most three players on a bye.

    Returns:
        ValidationResult; ``sanitized_value`` holds the active player count
    """
    if min(groups_of_4, groups_of_8, groups_of_12) < 0:
        return ValidationResult(
            is_valid=False,
            error_message="Group counts cannot be negative",
        )

    active_players = (
        groups_of_4 * GROUP_SIZE_4
        + groups_of_8 * GROUP_SIZE_8
        + groups_of_12 * GROUP_SIZE_12
    )

    if active_players > total_players:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Total active players ({active_players}) cannot exceed "
                f"total players ({total_players})"
            ),
            sanitized_value=active_players,
        )

    if active_players < total_players - MAX_BYES:
        return ValidationResult(
            is_valid=False,
            error_message=(
                "Too many byes. Total active players must be at least "
                f"{total_players - MAX_BYES}"
            ),
            sanitized_value=active_players,
        )

    return ValidationResult(is_valid=True, sanitized_value=active_players)


def validate_custom_groups_strict(
    total_players: int,
    groups_of_4: int,
    groups_of_8: int,
    groups_of_12: int,
) -> int:
    """Validate custom groups and return the active player count.

    Raises:
        GroupConfigurationException: If the configuration does not fit
    """
    result = validate_custom_groups(
        total_players, groups_of_4, groups_of_8, groups_of_12
    )
    if not result.is_valid:
        raise GroupConfigurationException(result.error_message)
    return result.sanitized_value


# ========== Skill Rating Validation ==========


def validate_skill_rating(rating: Optional[int]) -> ValidationResult:
    """Validate an optional initial skill rating (1-5)."""
    if rating is None:
        return ValidationResult(is_valid=True, sanitized_value=None)

    if isinstance(rating, bool) or not isinstance(rating, int):
        return ValidationResult(
            is_valid=False,
            error_message=f"Skill rating must be a whole number: {rating!r}",
        )

    if not MIN_SKILL_RATING <= rating <= MAX_SKILL_RATING:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Skill rating must be between {MIN_SKILL_RATING} and "
                f"{MAX_SKILL_RATING} (got {rating})"
            ),
        )

    return ValidationResult(is_valid=True, sanitized_value=rating)


def validate_skill_rating_strict(rating: Optional[int]) -> Optional[int]:
    """Validate skill rating and raise exception if invalid.

    Raises:
        SkillRatingValidationException: If rating is out of range
    """
    result = validate_skill_rating(rating)
    if not result.is_valid:
        raise SkillRatingValidationException(result.error_message)
    return result.sanitized_value
