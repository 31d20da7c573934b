"""Exhaustive enumeration of perfect matchings.

Both team building (players into pairs) and match building (teams into
pairs) need every way to split an even-sized list into pairs. The search
takes the lowest unused index and pairs it with each later unused index
in turn, so matchings come out in a fixed order and the first one found
wins ties downstream.
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

from typing import Iterator

from roundnetpairing.constants import MAX_GROUP_SIZE
from roundnetpairing.exceptions import GroupTooLargeException, OddGroupSizeException
from roundnetpairing.type_hints import IndexPairing


def check_pairable(count: int, noun: str = "items") -> None:
    """Ensure ``count`` items can be split into pairs exhaustively.

    Raises:
        OddGroupSizeException: If count is odd
        GroupTooLargeException: If count exceeds MAX_GROUP_SIZE
    """
    if count % 2 != 0:
        raise OddGroupSizeException(
            f"Cannot split {count} {noun} into pairs: count must be even"
        )
    if count > MAX_GROUP_SIZE:
        raise GroupTooLargeException(
            f"Cannot enumerate pairings of {count} {noun}: "
            f"at most {MAX_GROUP_SIZE} are supported"
        )


def count_perfect_matchings(count: int) -> int:
    """Number of perfect matchings of ``count`` items, i.e. (count - 1)!!."""
    if count % 2 != 0:
        return 0
    total = 1
    for k in range(count - 1, 0, -2):
        total *= k
    return total


def iter_perfect_matchings(count: int) -> Iterator[IndexPairing]:
    """Yield every perfect matching of indices ``0..count-1``.

    Each matching is a list of ``(i, j)`` index pairs with ``i < j``.
    A used-index bitmask replaces list copying during the search.

    Raises:
        OddGroupSizeException: If count is odd
        GroupTooLargeException: If count exceeds MAX_GROUP_SIZE
    """
    check_pairable(count)
    full = (1 << count) - 1
    pairs: IndexPairing = []

    def search(used: int) -> Iterator[IndexPairing]:
        if used == full:
            yield list(pairs)
            return
        first = 0
        while used >> first & 1:
            first += 1
        for second in range(first + 1, count):
            if used >> second & 1:
                continue
            pairs.append((first, second))
            yield from search(used | 1 << first | 1 << second)
            pairs.pop()

    yield from search(0)
