"""Type hints used in Roundnet Pairing."""

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

from typing import List, Tuple

# Players ranked and split into groups for one round
Groups = List[List["Player"]]
# Index pairs into a list of players or teams
IndexPairing = List[Tuple[int, int]]
# One way to split a group into teams
TeamSet = List["Team"]
# One way to pair teams into matches
MatchSet = List["Match"]

#  LocalWords:  TeamSet MatchSet IndexPairing
