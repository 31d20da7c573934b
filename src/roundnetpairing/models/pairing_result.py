"""Result data classes produced by the pairing engine."""

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

from dataclasses import dataclass, field
from typing import List, Optional

from roundnetpairing.models.group_config import GroupConfiguration
from roundnetpairing.models.round_data import Match, RoundData, Team
from roundnetpairing.player import Player


@dataclass
class TeamSelection:
    """The chosen team split for one group, with the figures it won on."""

    teams: List[Team]
    repeat_partner_count: int
    max_team_score: float
    min_team_score: float

    @property
    def score_difference(self) -> float:
        return self.max_team_score - self.min_team_score


@dataclass
class MatchSelection:
    """The chosen match-ups for one group's teams."""

    matches: List[Match]
    repeat_opponent_count: int
    total_score_difference: float


@dataclass
class PairingResult:
    """Result of generating a single round.

    On failure ``success`` is False, ``round`` is empty, and ``errors``
    holds the messages explaining why.
    """

    success: bool
    round: RoundData
    byes: List[str] = field(default_factory=list)
    groups: List[List[Player]] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    group_configuration: Optional[GroupConfiguration] = None
    team_selections: List[TeamSelection] = field(default_factory=list)
    match_selections: List[MatchSelection] = field(default_factory=list)

    @property
    def matches(self) -> List[Match]:
        return self.round.matches

    @classmethod
    def failure(cls, round_number: int, errors: List[str]) -> "PairingResult":
        return cls(
            success=False,
            round=RoundData(round_number=round_number),
            errors=list(errors),
        )


#  LocalWords:  PairingResult
