# Doubles Pairing
# Copyright (C) 2025  Doubles Pairing developers
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
SAVE_FILE_EXTENSION = ".json"

# Team slots
TEAM_A = "A"
TEAM_B = "B"
TEAM_C = "C"
TEAM_D = "D"
TEAM_SLOTS = (TEAM_A, TEAM_B, TEAM_C, TEAM_D)

# Inter-club defaults: two slots per club
DEFAULT_HOME_TEAMS = (TEAM_A, TEAM_B)
DEFAULT_AWAY_TEAMS = (TEAM_C, TEAM_D)

# Internal round robin, period 3
INTERNAL_MATCHUP_CYCLE = (
    ((TEAM_A, TEAM_B), (TEAM_C, TEAM_D)),
    ((TEAM_A, TEAM_C), (TEAM_B, TEAM_D)),
    ((TEAM_A, TEAM_D), (TEAM_B, TEAM_C)),
)

# Skill tier weights (A best)
SKILL_WEIGHTS = {"A": 3, "B": 2, "C": 1}

# Tournament defaults
DEFAULT_PLAYERS_PER_TEAM = 10
DEFAULT_POINTS_PER_ROUND = 5
DEFAULT_TOTAL_ROUNDS = 3

# Point assignment tuning
FLOOR_PRIORITY_WEIGHT = 1000
TOP_CANDIDATES = 3
DEFAULT_TARGET_SKILL = 4
# Last point is scheduled first from this many points upward
LAST_POINT_FIRST_THRESHOLD = 5

# Eligibility soft ceiling: max(floor + margin, floor * factor)
SOFT_CEILING_MARGIN = 3
SOFT_CEILING_FACTOR = 2.5

# Match status values
STATUS_SCHEDULED = "scheduled"
STATUS_IN_PROGRESS = "in-progress"
STATUS_COMPLETED = "completed"
