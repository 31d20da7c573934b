"""Round progression for a tournament."""

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
from typing import List, Optional, Sequence

from roundnetpairing.exceptions import (
    RoundNotFoundException,
    TournamentStateException,
)
from roundnetpairing.models import PairingResult, RoundData, TournamentConfig
from roundnetpairing.pairing import generate_round
from roundnetpairing.player import Player
from roundnetpairing.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages round creation and history for a tournament.

    This class is responsible for:
    - Generating the next round through the pairing engine
    - Keeping the ordered list of rounds
    - Undoing a round that has not been played yet
    """

    def __init__(self, config: TournamentConfig):
        """Initialize the round manager.

        Args:
            config: Tournament configuration supplying the grouping options
        """
        self.config = config
        self.rounds: List[RoundData] = []

    @property
    def last_round(self) -> Optional[RoundData]:
        return self.rounds[-1] if self.rounds else None

    @property
    def completed_rounds(self) -> List[RoundData]:
        return [r for r in self.rounds if r.is_completed]

    @property
    def completed_rounds_count(self) -> int:
        return len(self.completed_rounds)

    def get_round(self, round_number: int) -> Optional[RoundData]:
        """Get data for a specific round.

        Args:
            round_number: The round number (1-indexed)

        Returns:
            RoundData for the round, or None if it has not been generated
        """
        for round_data in self.rounds:
            if round_data.round_number == round_number:
                return round_data
        return None

    def create_round(
        self,
        players: Sequence[Player],
        round_number: int,
        rng: Optional[random.Random] = None,
    ) -> PairingResult:
        """Generate round ``round_number`` and store it on success.

        Args:
            players: Full roster, active and withdrawn
            round_number: Number of the round to generate
            rng: Random source for bye tie-breaks

        Returns:
            The PairingResult; failed results are returned without storing
            anything

        Raises:
            TournamentStateException: If the round already exists or the
                previous round is still open
        """
        if self.get_round(round_number) is not None:
            raise TournamentStateException(
                f"Round {round_number} has already been generated"
            )
        last = self.last_round
        if last is not None and not last.is_completed:
            raise TournamentStateException(
                f"Round {last.round_number} must be completed before "
                f"round {round_number} can be generated"
            )

        active_count = sum(1 for p in players if p.is_active)
        logger.info(
            f"Creating round {round_number} with {active_count} active players"
        )

        result = generate_round(
            players,
            round_number,
            self.rounds,
            mode=self.config.grouping_mode,
            prefer_larger=self.config.prefer_larger_groups,
            custom=self.config.active_custom_groups,
            rng=rng,
        )

        if not result.success:
            logger.warning(
                f"Round {round_number} was not created: {'; '.join(result.errors)}"
            )
            return result

        self.rounds.append(result.round)
        return result

    def undo_last_round(self) -> RoundData:
        """Remove the most recent round if it has not been completed.

        Returns:
            The removed round

        Raises:
            RoundNotFoundException: If there are no rounds
            TournamentStateException: If the last round is already completed
        """
        last = self.last_round
        if last is None:
            raise RoundNotFoundException("There is no round to undo")
        if last.is_completed:
            raise TournamentStateException(
                f"Round {last.round_number} is completed and cannot be undone"
            )

        self.rounds.pop()
        logger.info(f"Undid round {last.round_number}")
        return last
