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

# --- Constants ---

# Players per team and teams per match
TEAM_SIZE = 2
MATCH_SIZE = 2

# Group sizes (players per group); each group splits into 2v2 matches
GROUP_SIZE_4 = 4
GROUP_SIZE_8 = 8
GROUP_SIZE_12 = 12
GROUP_SIZES = (GROUP_SIZE_4, GROUP_SIZE_8, GROUP_SIZE_12)
# Perfect matchings of 12 players = 11!! = 10395
MAX_GROUP_SIZE = GROUP_SIZE_12

# Grouping modes
MODE_FIXED_4 = "fixed4"  # groups of 4 only
MODE_MIXED = "mixed"  # groups of 8 and 12
DEFAULT_GROUPING_MODE = MODE_FIXED_4

# Player count bounds
MIN_PLAYERS = 8
MAX_PLAYERS_MIXED = 30
MAX_PLAYERS_FIXED_4 = 40
MAX_PLAYERS = {
    MODE_FIXED_4: MAX_PLAYERS_FIXED_4,
    MODE_MIXED: MAX_PLAYERS_MIXED,
}

# A custom group configuration may leave at most this many players out
MAX_BYES = 3

# Initial skill rating (pre-tournament seeding only)
MIN_SKILL_RATING = 1
MAX_SKILL_RATING = 5

# Scoring systems
SCORING_WIN_LOSS = "win-loss"
SCORING_WIN_LOSS_BONUS = "win-loss-bonus"
DEFAULT_SCORING_SYSTEM = SCORING_WIN_LOSS

# Match points
WIN_POINTS = 3.0
LOSS_POINTS = 0.0
BONUS_POINTS = 1.0  # split between both teams by share of game points
DEFAULT_BYE_POINTS = 3.0

# Identifier prefixes (display/lookup only, never parsed)
PLAYER_ID_PREFIX = "player"
TEAM_ID_PREFIX = "team"
MATCH_ID_PREFIX = "match"

# Logging
LOG_LEVEL_ENV_VAR = "ROUNDNET_PAIRING_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
