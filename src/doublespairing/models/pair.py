"""Doubles pair value object."""

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

from dataclasses import dataclass
from typing import Tuple

from doublespairing.exceptions import InvalidPairingException
from doublespairing.models.player import Player
from doublespairing.type_hints import PairKey


@dataclass(frozen=True)
class Pair:
    """Two distinct players playing one side of one point.

    ``total_age`` and ``skill_score`` are computed on every access so they
    always reflect the current player attributes.
    """

    player1: Player
    player2: Player

    def __post_init__(self):
        if self.player1.id == self.player2.id:
            raise InvalidPairingException(
                f"A pair needs two different players, got {self.player1.name} twice"
            )

    @property
    def total_age(self) -> int:
        return self.player1.age + self.player2.age

    @property
    def skill_score(self) -> int:
        return self.player1.skill_weight + self.player2.skill_weight

    @property
    def key(self) -> PairKey:
        return frozenset({self.player1.id, self.player2.id})

    @property
    def players(self) -> Tuple[Player, Player]:
        return (self.player1, self.player2)

    def includes(self, player: Player) -> bool:
        return player.id in self.key

    def replace(self, old: Player, new: Player) -> "Pair":
        """Return a new pair with ``old`` swapped for ``new``."""
        if self.player1.id == old.id:
            return Pair(new, self.player2)
        if self.player2.id == old.id:
            return Pair(self.player1, new)
        raise InvalidPairingException(f"{old.name} is not part of {self}")

    @property
    def is_womens_doubles(self) -> bool:
        return self.player1.is_female and self.player2.is_female

    @property
    def is_mixed_doubles(self) -> bool:
        return self.player1.gender is not self.player2.gender

    @property
    def is_valid_last_point_pair(self) -> bool:
        """Last point must be women's or mixed doubles."""
        return self.is_womens_doubles or self.is_mixed_doubles

    def __str__(self) -> str:
        return f"{self.player1.name} / {self.player2.name}"
