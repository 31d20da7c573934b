"""A roundnet player (competitor) in a tournament."""

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

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from roundnetpairing.constants import PLAYER_ID_PREFIX
from roundnetpairing.utils import generate_id, setup_logger
from roundnetpairing.utils.validation import validate_skill_rating_strict

logger = setup_logger(__name__)


class Player:
    """Represents a player in the tournament.

    The pairing engine only reads a player's history. Histories are
    appended to by the tournament layer when a round is completed and are
    never rewritten; the id never changes.

    Attributes:
        id: Unique identifier for the player
        name: Player's display name
        score: Cumulative tournament score (fractional with bonus points)
        games_played: Number of completed matches
        wins: Matches won
        losses: Matches lost
        previous_teammates: Partner ids in chronological order
        previous_opponents: Opponent ids in chronological order
        bye_history: Round numbers in which the player had a bye
        initial_skill_rating: Optional 1-5 seed used before any games
        is_active: Whether the player takes part in future rounds
        removed_in_round: Round in which the player was withdrawn, if any
    """

    def __init__(
        self,
        name: str,
        initial_skill_rating: Optional[int] = None,
        player_id: Optional[str] = None,
        score: float = 0.0,
        previous_teammates: Optional[Iterable[str]] = None,
        previous_opponents: Optional[Iterable[str]] = None,
        bye_history: Optional[Iterable[int]] = None,
        is_active: bool = True,
    ) -> None:
        self.id: str = player_id or generate_id(PLAYER_ID_PREFIX)
        self.name: str = name
        self.initial_skill_rating: Optional[int] = validate_skill_rating_strict(
            initial_skill_rating
        )

        # Tournament participation status
        self.is_active: bool = is_active
        self.removed_in_round: Optional[int] = None

        # Results
        self.score: float = float(score)
        self.games_played: int = 0
        self.wins: int = 0
        self.losses: int = 0

        # History - append only
        self.previous_teammates: List[str] = list(previous_teammates or [])
        self.previous_opponents: List[str] = list(previous_opponents or [])
        self.bye_history: List[int] = list(bye_history or [])

    @property
    def bye_count(self) -> int:
        """Number of byes received so far."""
        return len(self.bye_history)

    @property
    def last_bye_round(self) -> int:
        """Most recent bye round, or -1 if the player never had a bye."""
        return max(self.bye_history) if self.bye_history else -1

    @property
    def seed_rating(self) -> int:
        """Initial skill rating for seeding, 0 when unrated."""
        return self.initial_skill_rating or 0

    def has_partnered(self, other_id: str) -> bool:
        """Check whether this player has teamed up with ``other_id`` before."""
        return other_id in self.previous_teammates

    def has_faced(self, other_id: str) -> bool:
        """Check whether this player has played against ``other_id`` before."""
        return other_id in self.previous_opponents

    def add_match_result(
        self,
        partner_id: str,
        opponent_ids: Iterable[str],
        points: float,
        won: bool,
    ) -> None:
        """Record a completed match for this player.

        Args:
            partner_id: Teammate in the match
            opponent_ids: Both members of the opposing team
            points: Tournament points earned (including any bonus)
            won: Whether this player's team won
        """
        self.score += points
        self.games_played += 1
        if won:
            self.wins += 1
        else:
            self.losses += 1
        self.previous_opponents.extend(
            opp_id for opp_id in opponent_ids if opp_id and opp_id != self.id
        )
        if partner_id and partner_id != self.id:
            self.previous_teammates.append(partner_id)

    def add_bye(self, round_number: int, points: float) -> None:
        """Record a bye for ``round_number`` and award the bye points."""
        self.bye_history.append(round_number)
        self.score += points
        logger.debug("Player %s received a bye in round %s", self.name, round_number)

    def deactivate(self, round_number: Optional[int] = None) -> None:
        """Withdraw the player from future rounds, keeping their history."""
        self.is_active = False
        self.removed_in_round = round_number

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player data to dictionary format.

        Returns:
            Dictionary containing all player data (excludes private attributes)
        """
        data = {}
        for k, v in self.__dict__.items():
            if not k.startswith("_"):
                data[k] = list(v) if isinstance(v, list) else v
        return data

    @classmethod
    def from_dict(cls, player_data: Dict[str, Any]) -> "Player":
        """Create a Player instance from serialized dictionary data.

        Args:
            player_data: Dictionary containing player data

        Returns:
            Player instance with restored state
        """
        player = cls(
            name=player_data["name"],
            initial_skill_rating=player_data.get("initial_skill_rating"),
            player_id=player_data.get("id"),
        )

        # Restore all saved attributes
        for key, value in player_data.items():
            if hasattr(player, key) and not key.startswith("_"):
                setattr(player, key, list(value) if isinstance(value, list) else value)

        return player

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"Player(name='{self.name}', score={self.score}, id='{self.id}')"

    def __str__(self) -> str:
        """Return human-readable string representation."""
        return f"{self.name} ({self.score:g})"
