"""Bye assignment.

Players with the fewest byes sit out first; among those, the one whose
last bye is oldest goes first (never-byed players count as oldest).
Remaining ties are broken at random so that identical histories do not
always favour the same player.
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
from typing import List, Optional, Sequence, Tuple

from roundnetpairing.exceptions import InvalidPairingException
from roundnetpairing.player import Player
from roundnetpairing.utils import setup_logger

logger = setup_logger(__name__)


def bye_priority(player: Player) -> Tuple[int, int]:
    """Sort key: bye count, then most recent bye round (-1 if none)."""
    return (player.bye_count, player.last_bye_round)


def assign_byes(
    players: Sequence[Player],
    bye_count: int,
    current_round: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[List[str], List[Player]]:
    """Choose which players sit out this round.

    Inactive players are dropped before ranking and never receive a bye.

    Args:
        players: Candidate players
        bye_count: Number of byes required
        current_round: Round being paired; reserved, not used for ranking
        rng: Random source for tie-breaks (module RNG when omitted)

    Returns:
        Tuple of (bye player ids, remaining players)

    Raises:
        InvalidPairingException: If bye_count is negative or exceeds the
            number of active players
    """
    active = [p for p in players if p.is_active]

    if bye_count < 0:
        raise InvalidPairingException(f"Bye count cannot be negative: {bye_count}")
    if bye_count > len(active):
        raise InvalidPairingException(
            f"Cannot assign {bye_count} byes to {len(active)} active players"
        )
    if bye_count == 0:
        return [], active

    rng = rng or random
    # The random component only orders players whose bye priority is equal
    ranked = sorted(active, key=lambda p: bye_priority(p) + (rng.random(),))

    byes = [p.id for p in ranked[:bye_count]]
    remaining = ranked[bye_count:]

    logger.debug(
        "Round %s byes: %s",
        current_round,
        ", ".join(f"{p.name} ({p.bye_count} prior)" for p in ranked[:bye_count]),
    )
    return byes, remaining
