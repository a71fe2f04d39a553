"""Eligibility policy: may a player still be assigned another point?"""

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

from typing import Mapping

from doublespairing.constants import SOFT_CEILING_FACTOR, SOFT_CEILING_MARGIN
from doublespairing.models.player import Player


def soft_ceiling(min_matches: int) -> float:
    """Count at which a player who already met the floor stops being eligible."""
    return max(min_matches + SOFT_CEILING_MARGIN, min_matches * SOFT_CEILING_FACTOR)


def is_below_floor(
    player: Player, min_matches: int, assigned_counts: Mapping[str, int]
) -> bool:
    return assigned_counts.get(player.id, 0) < min_matches


def is_eligible(
    player: Player, min_matches: int, assigned_counts: Mapping[str, int]
) -> bool:
    """Whether ``player`` may be assigned again.

    Below the floor a player is always eligible, whatever the ceiling. At or
    above it the player stays eligible until the soft ceiling, so uneven
    rosters let a few players absorb the surplus slots.
    """
    count = assigned_counts.get(player.id, 0)
    if count < min_matches:
        return True
    return count < soft_ceiling(min_matches)
