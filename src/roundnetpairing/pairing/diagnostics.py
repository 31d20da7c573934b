"""Round diagnostics.

Explains a generated round after the fact: who sat out, how the groups
were ranked, and how each match scores on repeat partners, repeat
opponents and score gap. Also provides a structural sanity check used by
the simulator.
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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence

from roundnetpairing.constants import GROUP_SIZE_4, GROUP_SIZES
from roundnetpairing.exceptions import InvalidPairingException
from roundnetpairing.models import Match, PairingResult, Team
from roundnetpairing.pairing.matches import count_repeat_opponents
from roundnetpairing.player import Player
from roundnetpairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class TeamDiagnostics:
    player1_name: str
    player2_name: str
    combined_score: float
    had_partnership: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player1": self.player1_name,
            "player2": self.player2_name,
            "combined_score": self.combined_score,
            "had_partnership": self.had_partnership,
        }


@dataclass
class MatchDiagnostics:
    match_id: str
    team1: TeamDiagnostics
    team2: TeamDiagnostics
    score_gap: float
    repeat_opponents: int

    @property
    def has_repeat_opponents(self) -> bool:
        return self.repeat_opponents > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "match_id": self.match_id,
            "team1": self.team1.to_dict(),
            "team2": self.team2.to_dict(),
            "score_gap": self.score_gap,
            "has_repeat_opponents": self.has_repeat_opponents,
        }


@dataclass
class RoundDiagnostics:
    """Everything ``debug_round`` found out about one round."""

    round_number: int
    player_count: int
    group_configuration: Dict[str, int] = field(default_factory=dict)
    bye_assignments: List[Dict[str, Any]] = field(default_factory=list)
    groups: List[Dict[str, Any]] = field(default_factory=list)
    matches: List[MatchDiagnostics] = field(default_factory=list)

    # Totals
    total_repeat_partnerships: int = 0
    total_repeat_opponents: int = 0
    average_score_gap: float = 0.0
    max_score_gap: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "round_number": self.round_number,
            "player_count": self.player_count,
            "group_configuration": dict(self.group_configuration),
            "bye_assignments": list(self.bye_assignments),
            "groups": list(self.groups),
            "matches": [m.to_dict() for m in self.matches],
            "stats": {
                "total_repeat_partnerships": self.total_repeat_partnerships,
                "total_repeat_opponents": self.total_repeat_opponents,
                "average_score_gap": self.average_score_gap,
                "max_score_gap": self.max_score_gap,
            },
        }


def _team_diagnostics(
    team: Team, players_by_id: Mapping[str, Player]
) -> TeamDiagnostics:
    player1 = players_by_id.get(team.player1_id)
    player2 = players_by_id.get(team.player2_id)
    had_partnership = bool(
        player1 and player2 and (
            player1.has_partnered(player2.id) or player2.has_partnered(player1.id)
        )
    )
    return TeamDiagnostics(
        player1_name=player1.name if player1 else team.player1_id,
        player2_name=player2.name if player2 else team.player2_id,
        combined_score=team.combined_score,
        had_partnership=had_partnership,
    )


def _match_diagnostics(
    match: Match, players_by_id: Mapping[str, Player]
) -> MatchDiagnostics:
    return MatchDiagnostics(
        match_id=match.id,
        team1=_team_diagnostics(match.team1, players_by_id),
        team2=_team_diagnostics(match.team2, players_by_id),
        score_gap=match.score_gap,
        repeat_opponents=count_repeat_opponents([match], players_by_id),
    )


def debug_round(players: Sequence[Player], result: PairingResult) -> RoundDiagnostics:
    """Build a diagnostic report for a generated round.

    ``players`` must reflect the state the round was generated from, i.e.
    before the round is completed, or repeat counts will include the round
    itself.

    Raises:
        InvalidPairingException: If ``result`` is a failed round
    """
    if not result.success:
        raise InvalidPairingException(
            f"Round generation failed: {', '.join(result.errors)}"
        )

    players_by_id = {p.id: p for p in players}
    diagnostics = RoundDiagnostics(
        round_number=result.round.round_number,
        player_count=len(players),
    )

    if result.group_configuration is not None:
        config = result.group_configuration
        diagnostics.group_configuration = {
            "byes": config.byes,
            "groups_of_4": config.groups_of_4,
            "groups_of_8": config.groups_of_8,
            "groups_of_12": config.groups_of_12,
            "total_groups": config.total_groups,
        }

    for player_id in result.byes:
        player = players_by_id.get(player_id)
        diagnostics.bye_assignments.append(
            {
                "player_id": player_id,
                "player_name": player.name if player else player_id,
                "previous_byes": player.bye_count if player else 0,
            }
        )

    for index, group in enumerate(result.groups, start=1):
        diagnostics.groups.append(
            {
                "group_index": index,
                "players": [
                    {
                        "player_id": p.id,
                        "player_name": p.name,
                        "current_score": p.score,
                        "rank": rank,
                    }
                    for rank, p in enumerate(group, start=1)
                ],
            }
        )

    for match in result.matches:
        match_diag = _match_diagnostics(match, players_by_id)
        diagnostics.matches.append(match_diag)
        diagnostics.total_repeat_partnerships += int(match_diag.team1.had_partnership)
        diagnostics.total_repeat_partnerships += int(match_diag.team2.had_partnership)
        diagnostics.total_repeat_opponents += match_diag.repeat_opponents

    gaps = [m.score_gap for m in diagnostics.matches]
    if gaps:
        diagnostics.average_score_gap = sum(gaps) / len(gaps)
        diagnostics.max_score_gap = max(gaps)

    logger.debug(
        f"Round {diagnostics.round_number} diagnostics: "
        f"{diagnostics.total_repeat_partnerships} repeat partnerships, "
        f"{diagnostics.total_repeat_opponents} repeat opponents"
    )
    return diagnostics


def format_diagnostics(diagnostics: RoundDiagnostics) -> str:
    """Render a report as plain text."""
    lines = [
        f"=== ROUND {diagnostics.round_number} DIAGNOSTICS ===",
        f"Player count: {diagnostics.player_count}",
        "",
        "Group configuration:",
    ]
    for key, value in diagnostics.group_configuration.items():
        lines.append(f"  {key.replace('_', ' ')}: {value}")

    if diagnostics.bye_assignments:
        lines.append("")
        lines.append("Bye assignments:")
        for bye in diagnostics.bye_assignments:
            lines.append(
                f"  {bye['player_name']} ({bye['previous_byes']} previous byes)"
            )

    lines.append("")
    lines.append("Groups:")
    for group in diagnostics.groups:
        lines.append(f"  Group {group['group_index']}:")
        for p in group["players"]:
            lines.append(
                f"    {p['rank']}. {p['player_name']} ({p['current_score']:g} pts)"
            )

    lines.append("")
    lines.append("Matches:")
    for number, match in enumerate(diagnostics.matches, start=1):
        lines.append(
            f"  Match {number}: {match.team1.player1_name}+{match.team1.player2_name}"
            f" vs {match.team2.player1_name}+{match.team2.player2_name}"
        )
        lines.append(
            f"    Score gap: {match.score_gap:g}, "
            f"repeat opponents: {match.repeat_opponents}"
        )

    lines.append("")
    lines.append("Statistics:")
    lines.append(
        f"  Total repeat partnerships: {diagnostics.total_repeat_partnerships}"
    )
    lines.append(f"  Total repeat opponents: {diagnostics.total_repeat_opponents}")
    lines.append(f"  Average score gap: {diagnostics.average_score_gap:.2f}")
    lines.append(f"  Max score gap: {diagnostics.max_score_gap:g}")
    return "\n".join(lines)


def validate_round_result(
    players: Sequence[Player], result: PairingResult
) -> List[str]:
    """Check a generated round for structural problems.

    Returns:
        List of problems found; empty when the round is sound
    """
    if not result.success:
        return ["Round generation failed"]

    errors: List[str] = []
    active = [p for p in players if p.is_active]
    in_groups = sum(len(group) for group in result.groups)

    if len(active) - len(result.byes) != in_groups:
        errors.append(
            f"Player count mismatch: {len(active) - len(result.byes)} playing, "
            f"{in_groups} in groups"
        )

    for group in result.groups:
        if len(group) not in GROUP_SIZES:
            errors.append(f"Invalid group size: {len(group)}")

    expected_matches = sum(len(group) // GROUP_SIZE_4 for group in result.groups)
    if len(result.matches) != expected_matches:
        errors.append(
            f"Match count mismatch: expected {expected_matches}, "
            f"got {len(result.matches)}"
        )

    seen: Dict[str, int] = {}
    for player_id in result.byes:
        seen[player_id] = seen.get(player_id, 0) + 1
    for match in result.matches:
        for player_id in match.player_ids:
            seen[player_id] = seen.get(player_id, 0) + 1
    for player_id, count in seen.items():
        if count > 1:
            errors.append(f"Player {player_id} appears {count} times in the round")

    inactive_ids = {p.id for p in players if not p.is_active}
    for player_id in inactive_ids & set(seen):
        errors.append(f"Inactive player {player_id} was paired")

    return errors
