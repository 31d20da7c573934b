"""Round generation.

Ties the pairing steps together for one round: size the groups, hand out
byes, rank and group the remaining players, then pick teams and matches
inside every group. Any failure along the way aborts the whole round and
comes back as a failed ``PairingResult``; nothing is raised to the caller.
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

import random
from typing import List, Optional, Sequence

from roundnetpairing.constants import DEFAULT_GROUPING_MODE
from roundnetpairing.exceptions import (
    GroupConfigurationException,
    InvalidPairingException,
    NoPairingAvailableException,
    RoundnetPairingException,
)
from roundnetpairing.models import (
    CustomGroupConfiguration,
    Match,
    MatchSelection,
    PairingResult,
    RoundData,
    TeamSelection,
)
from roundnetpairing.pairing.byes import assign_byes
from roundnetpairing.pairing.group_sizes import calculate_groups
from roundnetpairing.pairing.grouping import create_groups
from roundnetpairing.pairing.matches import select_matches
from roundnetpairing.pairing.teams import select_teams
from roundnetpairing.player import Player
from roundnetpairing.utils import setup_logger
from roundnetpairing.utils.validation import validate_custom_groups

logger = setup_logger(__name__)


def generate_round(
    players: Sequence[Player],
    round_number: int,
    history: Optional[Sequence[RoundData]] = None,
    *,
    mode: str = DEFAULT_GROUPING_MODE,
    prefer_larger: bool = True,
    custom: Optional[CustomGroupConfiguration] = None,
    rng: Optional[random.Random] = None,
) -> PairingResult:
    """Generate the pairings for one round.

    Args:
        players: Full roster; inactive players are skipped but still used to
            look up opponent scores
        round_number: Number of the round being paired
        history: Earlier rounds, for strength of schedule
        mode: Grouping mode, "fixed4" or "mixed"
        prefer_larger: Mixed mode only, favour groups of 12 over groups of 8
        custom: Explicit group counts overriding ``mode``
        rng: Random source for bye tie-breaks

    Returns:
        PairingResult; ``success`` is False and ``errors`` explains why when
        no round could be built
    """
    try:
        return _build_round(
            players, round_number, history or [], mode, prefer_larger, custom, rng
        )
    except RoundnetPairingException as e:
        logger.error(f"Round {round_number} generation failed: {e}")
        return PairingResult.failure(round_number, [str(e)])
    except Exception as e:
        logger.exception(f"Unexpected error generating round {round_number}")
        return PairingResult.failure(round_number, [f"Unexpected error: {e}"])


def _build_round(
    players: Sequence[Player],
    round_number: int,
    history: Sequence[RoundData],
    mode: str,
    prefer_larger: bool,
    custom: Optional[CustomGroupConfiguration],
    rng: Optional[random.Random],
) -> PairingResult:
    players_by_id = {p.id: p for p in players}
    active = [p for p in players if p.is_active]

    if custom is not None and custom.use_custom_groups:
        check = validate_custom_groups(
            len(active), custom.groups_of_4, custom.groups_of_8, custom.groups_of_12
        )
        if not check:
            raise GroupConfigurationException(check.error_message)

    group_config = calculate_groups(len(active), mode, prefer_larger, custom)
    if group_config.total_groups == 0 and active:
        raise InvalidPairingException(
            f"Cannot form any groups of 4, 8 or 12 from {len(active)} "
            f"active players in {mode} mode"
        )

    byes, remaining = assign_byes(active, group_config.byes, round_number, rng)
    groups = create_groups(remaining, group_config, history, players_by_id)

    matches: List[Match] = []
    team_selections: List[TeamSelection] = []
    match_selections: List[MatchSelection] = []
    for index, group in enumerate(groups, start=1):
        if not group:
            raise NoPairingAvailableException(f"Group {index} has no players")
        team_selection = select_teams(group)
        match_selection = select_matches(
            team_selection.teams, players_by_id, round_number
        )
        team_selections.append(team_selection)
        match_selections.append(match_selection)
        matches.extend(match_selection.matches)

    logger.info(
        f"Round {round_number}: {len(matches)} matches in {len(groups)} groups, "
        f"{len(byes)} byes"
    )
    return PairingResult(
        success=True,
        round=RoundData(round_number=round_number, matches=matches, byes=byes),
        byes=byes,
        groups=groups,
        group_configuration=group_config,
        team_selections=team_selections,
        match_selections=match_selections,
    )
