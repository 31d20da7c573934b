"""Data models for teams, matches and tournament rounds."""

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
from typing import Any, Dict, List, Optional, Tuple

from roundnetpairing.constants import MATCH_ID_PREFIX, TEAM_ID_PREFIX


@dataclass(frozen=True)
class Team:
    """Two players playing together for one round.

    Membership is carried by the two id fields; ``id`` is a display key
    and is never parsed back into player ids.

    Attributes
    ----------
    player1_id : str
        First member.
    player2_id : str
        Second member.
    combined_score : float
        Sum of both members' scores when the team was formed.
    """

    player1_id: str
    player2_id: str
    combined_score: float = 0.0

    def __post_init__(self) -> None:
        if self.player1_id == self.player2_id:
            raise ValueError(f"A team needs two distinct players: {self.player1_id}")

    @property
    def id(self) -> str:
        return f"{TEAM_ID_PREFIX}-{self.player1_id}-{self.player2_id}"

    @property
    def player_ids(self) -> Tuple[str, str]:
        return (self.player1_id, self.player2_id)

    @property
    def key(self) -> frozenset:
        """Order-independent identity of the team."""
        return frozenset(self.player_ids)

    def has_player(self, player_id: str) -> bool:
        return player_id in self.player_ids

    def partner_of(self, player_id: str) -> str:
        """Return the other member of the team."""
        if player_id == self.player1_id:
            return self.player2_id
        if player_id == self.player2_id:
            return self.player1_id
        raise KeyError(f"Player {player_id} is not on team {self.id}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "combined_score": self.combined_score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        return cls(
            player1_id=data["player1_id"],
            player2_id=data["player2_id"],
            combined_score=data.get("combined_score", 0.0),
        )


@dataclass
class Match:
    """A match between two teams in a single round.

    Attributes
    ----------
    round_number : int
        Round the match belongs to (1-indexed).
    team1, team2 : Team
        The two sides.
    team1_score, team2_score : float or None
        Game scores, set once the result is entered.
    is_completed : bool
        Whether a score has been recorded.
    """

    round_number: int
    team1: Team
    team2: Team
    team1_score: Optional[float] = None
    team2_score: Optional[float] = None
    is_completed: bool = False

    @property
    def id(self) -> str:
        return f"{MATCH_ID_PREFIX}-{self.team1.id}-{self.team2.id}"

    @property
    def teams(self) -> Tuple[Team, Team]:
        return (self.team1, self.team2)

    @property
    def player_ids(self) -> Tuple[str, ...]:
        return self.team1.player_ids + self.team2.player_ids

    @property
    def score_gap(self) -> float:
        """Absolute difference between the teams' combined scores."""
        return abs(self.team1.combined_score - self.team2.combined_score)

    def team_of(self, player_id: str) -> Optional[Team]:
        for team in self.teams:
            if team.has_player(player_id):
                return team
        return None

    def opponents_of(self, player_id: str) -> Tuple[str, ...]:
        """Return the ids on the other side of the net from ``player_id``."""
        if self.team1.has_player(player_id):
            return self.team2.player_ids
        if self.team2.has_player(player_id):
            return self.team1.player_ids
        return ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "round_number": self.round_number,
            "team1": self.team1.to_dict(),
            "team2": self.team2.to_dict(),
            "team1_score": self.team1_score,
            "team2_score": self.team2_score,
            "is_completed": self.is_completed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        return cls(
            round_number=data["round_number"],
            team1=Team.from_dict(data["team1"]),
            team2=Team.from_dict(data["team2"]),
            team1_score=data.get("team1_score"),
            team2_score=data.get("team2_score"),
            is_completed=data.get("is_completed", False),
        )


@dataclass
class RoundData:
    """Container for all data related to a single tournament round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    matches : list of Match
        Matches generated for the round.
    byes : list of str
        IDs of the players sitting out.
    is_completed : bool
        Set when every match has a score and the round was closed.
    """

    round_number: int
    matches: List[Match] = field(default_factory=list)
    byes: List[str] = field(default_factory=list)
    is_completed: bool = False

    @property
    def all_matches_completed(self) -> bool:
        return all(match.is_completed for match in self.matches)

    def get_match(self, match_id: str) -> Optional[Match]:
        for match in self.matches:
            if match.id == match_id:
                return match
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round_number": self.round_number,
            "matches": [m.to_dict() for m in self.matches],
            "byes": list(self.byes),
            "is_completed": self.is_completed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundData":
        """Deserialize round data from dictionary."""
        return cls(
            round_number=data["round_number"],
            matches=[Match.from_dict(m) for m in data.get("matches", [])],
            byes=list(data.get("byes", [])),
            is_completed=data.get("is_completed", False),
        )
