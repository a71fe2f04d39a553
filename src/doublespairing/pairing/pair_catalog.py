"""Pair catalog: every unordered pair from a candidate list."""

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

from itertools import combinations
from typing import Iterable, List, Sequence

from doublespairing.models.pair import Pair
from doublespairing.models.player import Player
from doublespairing.type_hints import PairKey, UsedPairKeys


def pair_key(pair: Pair) -> PairKey:
    """Order-independent identity of a pair."""
    return pair.key


def build_pair_catalog(players: Sequence[Player]) -> List[Pair]:
    """Return all ``n*(n-1)/2`` pairs of ``players`` in input order.

    Fewer than two players yields an empty catalog, meaning no assignment
    is possible from this candidate set.
    """
    return [Pair(first, second) for first, second in combinations(players, 2)]


def drop_used_pairs(pairs: Iterable[Pair], used_keys: UsedPairKeys) -> List[Pair]:
    return [pair for pair in pairs if pair.key not in used_keys]
