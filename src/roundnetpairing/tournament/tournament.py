"""Tournament facade."""

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

import random
from typing import Any, Dict, List, Optional

from roundnetpairing.exceptions import (
    DuplicatePlayerException,
    PlayerCountValidationException,
    PlayerNotFoundException,
    RoundNotFoundException,
    TournamentStateException,
)
from roundnetpairing.models import (
    CustomGroupConfiguration,
    GroupConfiguration,
    Match,
    PairingResult,
    RoundData,
    TournamentConfig,
)
from roundnetpairing.pairing import preview_group_configuration
from roundnetpairing.player import Player, create_player, create_player_from_dict
from roundnetpairing.tournament.result_recorder import ResultRecorder
from roundnetpairing.tournament.round_manager import RoundManager
from roundnetpairing.tournament.standings import (
    PlayerStats,
    get_leaderboard,
    get_player_stats,
)
from roundnetpairing.utils import setup_logger

logger = setup_logger(__name__)


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized managers:
    - RoundManager: generates rounds and keeps their history
    - ResultRecorder: records scores and applies completed rounds to players

    The pairing engine itself holds no state; the Tournament owns the
    roster and the rounds and passes them in on every call.
    """

    def __init__(
        self,
        config: Optional[TournamentConfig] = None,
        players: Optional[List[Player]] = None,
    ) -> None:
        """Initialize a new tournament.

        Args
        ----
        config: Tournament settings, defaults to TournamentConfig()
        players: Players registered up front
        """
        self.config = config or TournamentConfig()
        self.players: Dict[str, Player] = {p.id: p for p in players or []}

        self.is_started: bool = False
        self.current_round: int = 0
        self.group_config: Optional[GroupConfiguration] = None

        # Specialized managers
        self.round_manager = RoundManager(self.config)
        self.result_recorder = ResultRecorder()

    # ========== Properties ==========

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @property
    def rounds(self) -> List[RoundData]:
        return self.round_manager.rounds

    def _require_not_started(self, action: str) -> None:
        if self.is_started:
            raise TournamentStateException(
                f"Cannot {action} after the tournament has started"
            )

    def _require_started(self, action: str) -> None:
        if not self.is_started:
            raise TournamentStateException(
                f"Cannot {action} before the tournament has started"
            )

    # ========== Player Management ==========

    def get_player(self, player_id: str) -> Player:
        player = self.players.get(player_id)
        if player is None:
            raise PlayerNotFoundException(f"Player {player_id} not found")
        return player

    def get_player_list(self, active_only: bool = False) -> List[Player]:
        """Get list of tournament players.

        Args:
            active_only: If True, only return active players
        """
        players = list(self.players.values())
        if active_only:
            return [p for p in players if p.is_active]
        return players

    def add_player(
        self, name: str, initial_skill_rating: Optional[int] = None
    ) -> Player:
        """Register a new player.

        Raises:
            TournamentStateException: If the tournament has started
            DuplicatePlayerException: If a player with that name exists
            PlayerCountValidationException: If the roster is full
            InvalidPlayerDataException: If the name or rating is invalid
        """
        self._require_not_started("add players")

        player = create_player(name, initial_skill_rating)
        key = player.name.casefold()
        if any(p.name.casefold() == key for p in self.players.values()):
            raise DuplicatePlayerException(f"Player '{player.name}' already exists")
        if len(self.players) >= self.config.max_players:
            raise PlayerCountValidationException(
                f"Maximum {self.config.max_players} players allowed "
                f"(currently have {len(self.players)})"
            )

        self.players[player.id] = player
        logger.info(f"Added player: {player.name} ({player.id})")
        return player

    def remove_player(self, player_id: str) -> None:
        """Remove a player.

        Before the tournament starts the player is deleted. Afterwards the
        player is withdrawn from future rounds and keeps their results.

        Raises:
            PlayerNotFoundException: If no player has ``player_id``
        """
        player = self.get_player(player_id)
        if not self.is_started:
            del self.players[player_id]
            logger.info(f"Removed player: {player.name} ({player_id})")
            return

        player.deactivate(self.current_round)
        logger.info(
            f"Withdrew player {player.name} ({player_id}) in round {self.current_round}"
        )

    # ========== Configuration ==========

    def set_custom_groups(self, custom: Optional[CustomGroupConfiguration]) -> None:
        """Set or clear explicit group counts.

        Raises:
            TournamentStateException: If the tournament has started
        """
        self._require_not_started("change the group configuration")
        self.config.custom_groups = custom

    def group_configuration(self) -> GroupConfiguration:
        """Preview how the current roster would be grouped.

        Raises:
            PlayerCountValidationException: If the player count is out of bounds
            GroupConfigurationException: If custom counts do not fit the roster
        """
        return preview_group_configuration(
            len(self.get_player_list(active_only=True)),
            self.config.grouping_mode,
            self.config.active_custom_groups,
            self.config.prefer_larger_groups,
        )

    def start(self) -> GroupConfiguration:
        """Lock the roster and move to round 1.

        Raises:
            TournamentStateException: If the tournament has already started
            ValidationException: If the roster or custom groups are invalid
        """
        self._require_not_started("start the tournament again")
        if len(self.players) > self.config.max_players:
            raise PlayerCountValidationException(
                f"Maximum {self.config.max_players} players allowed "
                f"(currently have {len(self.players)})"
            )

        self.group_config = self.group_configuration()
        self.is_started = True
        self.current_round = 1
        logger.info(
            f"Started tournament '{self.name}' with {len(self.players)} players"
        )
        return self.group_config

    # ========== Round Management ==========

    def get_current_round(self) -> Optional[RoundData]:
        return self.round_manager.get_round(self.current_round)

    def get_current_round_matches(self) -> List[Match]:
        current = self.get_current_round()
        return list(current.matches) if current else []

    def generate_next_round(self, rng: Optional[random.Random] = None) -> PairingResult:
        """Generate pairings for the current round.

        Returns:
            The PairingResult; on failure nothing is stored and ``errors``
            explains why

        Raises:
            TournamentStateException: If the tournament has not started or
                the current round has already been generated
        """
        self._require_started("generate a round")
        current = self.get_current_round()
        if current is not None:
            state = "completed" if current.is_completed else "in progress"
            raise TournamentStateException(
                f"Round {self.current_round} is already {state}"
            )

        result = self.round_manager.create_round(
            self.get_player_list(), self.current_round, rng
        )
        if not result.success:
            logger.error(
                f"Failed to generate round {self.current_round}: {result.errors}"
            )
        return result

    def undo_last_round(self) -> RoundData:
        """Discard the current round's pairings so it can be generated again."""
        return self.round_manager.undo_last_round()

    # ========== Result Management ==========

    def _require_current_round(self) -> RoundData:
        current = self.get_current_round()
        if current is None:
            raise RoundNotFoundException(
                f"Round {self.current_round} has not been generated"
            )
        return current

    def record_match_score(
        self, match_id: str, team1_score: float, team2_score: float
    ) -> Match:
        """Record the score of a match in the current round."""
        self._require_started("record scores")
        return self.result_recorder.record_match_score(
            self._require_current_round(), match_id, team1_score, team2_score
        )

    def complete_round(self) -> RoundData:
        """Apply the current round's results and advance to the next round.

        Raises:
            RoundNotFoundException: If the current round was not generated
            TournamentStateException: If a match still has no score
        """
        self._require_started("complete a round")
        current = self._require_current_round()
        self.result_recorder.complete_round(current, self.players, self.config)
        self.current_round += 1
        return current

    # ========== Standings ==========

    def get_leaderboard(self) -> List[Player]:
        return get_leaderboard(self.get_player_list(), self.rounds)

    def get_player_stats(self, player_id: str) -> PlayerStats:
        return get_player_stats(player_id, self.get_player_list(), self.rounds)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary containing all tournament data
        """
        return {
            "config": self.config.to_dict(),
            "players": [p.to_dict() for p in self.players.values()],
            "rounds": [r.to_dict() for r in self.rounds],
            "is_started": self.is_started,
            "current_round": self.current_round,
            "group_config": self.group_config.to_dict() if self.group_config else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary.

        Args:
            data: Dictionary containing tournament data

        Returns:
            Reconstructed Tournament object
        """
        config = TournamentConfig.from_dict(data.get("config", {}))
        players = [create_player_from_dict(p) for p in data.get("players", [])]

        tournament = cls(config=config, players=players)
        tournament.round_manager.rounds = [
            RoundData.from_dict(r) for r in data.get("rounds", [])
        ]
        tournament.is_started = data.get("is_started", False)
        tournament.current_round = data.get("current_round", 0)

        group_config = data.get("group_config")
        if group_config:
            tournament.group_config = GroupConfiguration(**group_config)

        logger.info(f"Loaded tournament: {tournament.name}")
        return tournament
