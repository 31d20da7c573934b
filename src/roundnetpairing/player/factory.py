"""Helpers for creating validated Player instances."""

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

from typing import Any, Dict, List, Optional

from roundnetpairing.exceptions import (
    InvalidPlayerDataException,
    SkillRatingValidationException,
)
from roundnetpairing.player.base_player import Player
from roundnetpairing.utils import setup_logger
from roundnetpairing.utils.validation import validate_skill_rating

logger = setup_logger(__name__)


def _validate_data(name: Optional[str], initial_skill_rating: Any) -> List[str]:
    errors = []
    if not name or not str(name).strip():
        errors.append("Player name is required")
    result = validate_skill_rating(initial_skill_rating)
    if not result.is_valid:
        errors.append(result.error_message)
    return errors


def create_player(
    name: str,
    initial_skill_rating: Optional[int] = None,
    player_id: Optional[str] = None,
) -> Player:
    """Create a Player after validating its registration data.

    Args:
        name: Player's name (surrounding whitespace is stripped)
        initial_skill_rating: Optional 1-5 seed rating
        player_id: Explicit id, generated when omitted

    Returns:
        New Player instance

    Raises:
        InvalidPlayerDataException: If the name is blank or the rating is invalid
    """
    errors = _validate_data(name, initial_skill_rating)
    if errors:
        error_msg = "; ".join(errors)
        logger.warning("Rejected player registration: %s", error_msg)
        raise InvalidPlayerDataException(f"Invalid player data: {error_msg}")

    return Player(
        name=name.strip(),
        initial_skill_rating=initial_skill_rating,
        player_id=player_id,
    )


def create_player_from_dict(player_data: Dict[str, Any]) -> Player:
    """Restore a Player from a dictionary snapshot.

    Raises:
        InvalidPlayerDataException: If required fields are missing or invalid
    """
    if "name" not in player_data:
        raise InvalidPlayerDataException("Player data is missing 'name'")
    try:
        return Player.from_dict(player_data)
    except SkillRatingValidationException as e:
        raise InvalidPlayerDataException(f"Invalid player data: {e}") from e
