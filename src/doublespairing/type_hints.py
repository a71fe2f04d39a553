"""Type hints used in Doubles Pairing."""

from typing import TYPE_CHECKING, Dict, FrozenSet, List, Literal, Set

if TYPE_CHECKING:
    from doublespairing.models.player import Player

# Which side of a match: team1 plays pair1, team2 plays pair2
Side = Literal[1, 2]

# Order-independent identity of a pair of player ids
PairKey = FrozenSet[str]

# Roster partitioned by team slot
Teams = Dict[str, List["Player"]]
# Running count of scheduled points, keyed by player id
AssignedCounts = Dict[str, int]
UsedPairKeys = Set[PairKey]

#  LocalWords:  PairKey
