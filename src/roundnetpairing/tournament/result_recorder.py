"""Score entry and round completion."""

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

import math
from typing import Dict, Tuple

from roundnetpairing.constants import BONUS_POINTS, LOSS_POINTS, WIN_POINTS
from roundnetpairing.exceptions import (
    InvalidResultException,
    MatchNotFoundException,
    TournamentStateException,
)
from roundnetpairing.models import Match, RoundData, Team, TournamentConfig
from roundnetpairing.player import Player
from roundnetpairing.utils import setup_logger

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording match scores and closing rounds.

    This class is responsible for:
    - Validating and storing the game score of each match
    - Converting game scores into tournament points
    - Updating player statistics and histories when a round is completed
    - Awarding bye points
    """

    def record_match_score(
        self,
        round_data: RoundData,
        match_id: str,
        team1_score: float,
        team2_score: float,
    ) -> Match:
        """Store the game score of one match and mark it completed.

        Args:
            round_data: Round containing the match
            match_id: ``Match.id`` of the match
            team1_score: Points scored by team 1
            team2_score: Points scored by team 2

        Returns:
            The updated match

        Raises:
            TournamentStateException: If the round is already completed
            MatchNotFoundException: If the round has no such match
            InvalidResultException: If a score is negative, not finite, or the scores tie
        """
        if round_data.is_completed:
            raise TournamentStateException(
                f"Round {round_data.round_number} is already completed"
            )

        match = round_data.get_match(match_id)
        if match is None:
            raise MatchNotFoundException(
                f"Match {match_id} not found in round {round_data.round_number}"
            )

        self._validate_scores(team1_score, team2_score)

        if match.is_completed:
            logger.warning(
                f"Overwriting score {match.team1_score}-{match.team2_score} "
                f"for match {match_id}"
            )

        match.team1_score = team1_score
        match.team2_score = team2_score
        match.is_completed = True
        logger.debug(f"Recorded {team1_score}-{team2_score} for match {match_id}")
        return match

    def _validate_scores(self, team1_score: float, team2_score: float) -> None:
        if not (math.isfinite(team1_score) and math.isfinite(team2_score)):
            raise InvalidResultException(
                f"Scores must be finite numbers: {team1_score}-{team2_score}"
            )
        if team1_score < 0 or team2_score < 0:
            raise InvalidResultException(
                f"Scores cannot be negative: {team1_score}-{team2_score}"
            )
        if team1_score == team2_score:
            raise InvalidResultException(
                f"Matches cannot end in a tie: {team1_score}-{team2_score}"
            )

    def calculate_match_points(
        self, match: Match, config: TournamentConfig
    ) -> Tuple[float, float]:
        """Tournament points earned by each team of a completed match.

        The winner gets WIN_POINTS. With bonus scoring each team also earns
        BONUS_POINTS times its share of the points played.

        Returns:
            Tuple of (team 1 points, team 2 points)
        """
        if match.team1_score is None or match.team2_score is None:
            raise InvalidResultException(f"Match {match.id} has no score yet")

        team1_won = match.team1_score > match.team2_score
        team1_points = WIN_POINTS if team1_won else LOSS_POINTS
        team2_points = LOSS_POINTS if team1_won else WIN_POINTS

        if config.uses_bonus_points:
            total = match.team1_score + match.team2_score
            if total > 0:
                team1_points += BONUS_POINTS * match.team1_score / total
                team2_points += BONUS_POINTS * match.team2_score / total

        return team1_points, team2_points

    def complete_round(
        self,
        round_data: RoundData,
        players: Dict[str, Player],
        config: TournamentConfig,
    ) -> None:
        """Apply a fully scored round to the players and mark it completed.

        Args:
            round_data: Round to close
            players: Dictionary of all players (id -> Player)
            config: Tournament scoring settings

        Raises:
            TournamentStateException: If the round is already completed or a
                match has no score
        """
        if round_data.is_completed:
            raise TournamentStateException(
                f"Round {round_data.round_number} is already completed"
            )
        if not round_data.all_matches_completed:
            pending = sum(1 for m in round_data.matches if not m.is_completed)
            logger.warning(
                f"Cannot complete round {round_data.round_number}: "
                f"{pending} matches still need a score"
            )
            raise TournamentStateException(
                f"Cannot complete round {round_data.round_number}: "
                "not all matches are finished"
            )

        for match in round_data.matches:
            team1_points, team2_points = self.calculate_match_points(match, config)
            team1_won = match.team1_score > match.team2_score
            self._apply_team_result(
                match.team1, match.team2, team1_points, team1_won, players
            )
            self._apply_team_result(
                match.team2, match.team1, team2_points, not team1_won, players
            )

        for player_id in round_data.byes:
            player = players.get(player_id)
            if player is None:
                logger.error(f"Cannot find bye player: {player_id}")
                continue
            player.add_bye(round_data.round_number, config.bye_points)

        round_data.is_completed = True
        logger.info(
            f"Completed round {round_data.round_number}: "
            f"{len(round_data.matches)} matches, {len(round_data.byes)} byes"
        )

    def _apply_team_result(
        self,
        team: Team,
        opponents: Team,
        points: float,
        won: bool,
        players: Dict[str, Player],
    ) -> None:
        for player_id in team.player_ids:
            player = players.get(player_id)
            if player is None:
                logger.error(f"Cannot find player {player_id} from team {team.id}")
                continue
            player.add_match_result(
                partner_id=team.partner_of(player_id),
                opponent_ids=opponents.player_ids,
                points=points,
                won=won,
            )
