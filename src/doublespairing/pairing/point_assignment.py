"""Point assignment: choose one pair for one side of one point."""

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

import random
from dataclasses import dataclass, field
from statistics import mean
from typing import List, Mapping, Optional, Sequence, Set

from doublespairing.constants import (
    DEFAULT_TARGET_SKILL,
    FLOOR_PRIORITY_WEIGHT,
    TOP_CANDIDATES,
)
from doublespairing.models.pair import Pair
from doublespairing.models.player import Player
from doublespairing.models.settings import TournamentSettings
from doublespairing.pairing.eligibility import is_below_floor, is_eligible
from doublespairing.pairing.pair_catalog import build_pair_catalog, drop_used_pairs
from doublespairing.type_hints import UsedPairKeys
from doublespairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class PointConstraints:
    """Which of the relaxable constraints are active for one attempt."""

    age_monotonic: bool = True
    round_exclusive: bool = True
    pair_unique: bool = True


STRICT_CONSTRAINTS = PointConstraints()


@dataclass
class PointRequest:
    """Everything needed to pick a pair for one side of one point.

    Attributes
    ----------
    point_number : int
        Point index within the matchup (1-indexed).
    team_players : sequence of Player
        Full roster of the team playing this side.
    settings : TournamentSettings
        Tournament settings (floor, points per round, rule switch).
    assigned_counts : mapping of str to int
        Points scheduled so far per player id, over completed rounds.
    used_pair_keys : set of frozenset
        Pairs this team already played this round.
    earlier_pairs : sequence of Pair
        This side's pairs at lower point indices of the same matchup.
    used_players : set of str
        Ids of players already placed anywhere in this round.
    """

    point_number: int
    team_players: Sequence[Player]
    settings: TournamentSettings
    assigned_counts: Mapping[str, int]
    used_pair_keys: UsedPairKeys = field(default_factory=set)
    earlier_pairs: Sequence[Pair] = ()
    used_players: Set[str] = field(default_factory=set)

    @property
    def is_last_point(self) -> bool:
        return self.point_number == self.settings.points_per_round

    @property
    def ordered_points_after(self) -> int:
        """Non-last points of the matchup still to be filled after this one."""
        if self.is_last_point:
            return 0
        return max(0, self.settings.points_per_round - 1 - self.point_number)


@dataclass
class PairSelection:
    """A chosen pair plus the soft rules that had to give way to reach it."""

    pair: Optional[Pair]
    age_order_relaxed: bool = False
    composition_relaxed: bool = False


def prioritize_players(
    players: Sequence[Player],
    min_matches: int,
    assigned_counts: Mapping[str, int],
    rng: random.Random,
) -> List[Player]:
    """Order players by assigned count, under-floor players first.

    Ties keep a random order so equal players do not always pair the same
    way.
    """
    shuffled = list(players)
    rng.shuffle(shuffled)

    def _priority(player: Player) -> int:
        count = assigned_counts.get(player.id, 0)
        if count < min_matches:
            return count - FLOOR_PRIORITY_WEIGHT
        return count

    return sorted(shuffled, key=_priority)


def select_candidates(
    request: PointRequest,
    constraints: PointConstraints,
    rng: random.Random,
) -> List[Player]:
    """Players that may be paired for this point.

    Under-floor players are always candidates. Others must pass the
    eligibility policy and, while round exclusivity applies, be unused this
    round. Exclusivity only applies with rule enforcement on and fewer than
    two players still under the floor. With fewer than two candidates the
    whole roster is used.
    """
    settings = request.settings
    floor = settings.min_matches_per_player
    counts = request.assigned_counts
    ordered = prioritize_players(request.team_players, floor, counts, rng)

    under_floor = [p for p in ordered if is_below_floor(p, floor, counts)]
    exclusive = (
        settings.enforce_rules and constraints.round_exclusive and len(under_floor) < 2
    )

    candidates = []
    for player in ordered:
        if is_below_floor(player, floor, counts):
            candidates.append(player)
            continue
        if not is_eligible(player, floor, counts):
            continue
        if exclusive and player.id in request.used_players:
            continue
        candidates.append(player)

    if len(candidates) < 2:
        return ordered
    return candidates


def _pick_last_point_pair(pairs: List[Pair], rng: random.Random) -> PairSelection:
    preferred = [pair for pair in pairs if pair.is_valid_last_point_pair]
    pool = preferred or list(pairs)
    rng.shuffle(pool)
    return PairSelection(pool[0], composition_relaxed=not preferred)


def _has_headroom(pair: Pair, pairs: Sequence[Pair], needed: int) -> bool:
    """Whether ``needed`` strictly older pairs can still follow ``pair``."""
    if needed <= 0:
        return True
    older_ages = {p.total_age for p in pairs if p.total_age > pair.total_age}
    return len(older_ages) >= needed


def _pick_ordered_point_pair(
    pairs: List[Pair],
    request: PointRequest,
    constraints: PointConstraints,
    rng: random.Random,
) -> PairSelection:
    ranked = sorted(pairs, key=lambda p: p.total_age)
    earlier = list(request.earlier_pairs)
    age_order_relaxed = False

    if constraints.age_monotonic:
        if earlier:
            max_age = max(p.total_age for p in earlier)
            older = [p for p in ranked if p.total_age > max_age]
            if older:
                ranked = older
            else:
                age_order_relaxed = True
                logger.debug(
                    "Point %s: no pair older than %s, age order filter skipped",
                    request.point_number,
                    max_age,
                )
        # Keep enough strictly older pairs for the remaining points
        needed = request.ordered_points_after
        with_headroom = [p for p in ranked if _has_headroom(p, ranked, needed)]
        if with_headroom:
            ranked = with_headroom

    if earlier:
        target = mean(p.skill_score for p in earlier)
    else:
        target = DEFAULT_TARGET_SKILL
    ranked.sort(key=lambda p: (abs(p.skill_score - target), p.total_age))

    choice = rng.choice(ranked[:TOP_CANDIDATES])
    return PairSelection(choice, age_order_relaxed=age_order_relaxed)


def select_pair(
    request: PointRequest,
    rng: random.Random,
    constraints: PointConstraints = STRICT_CONSTRAINTS,
) -> PairSelection:
    """Choose a pair for one side of one point.

    The last point prefers women's or mixed doubles and falls back to any
    pair. Other points take pairs older than every earlier pair of the
    matchup, closest in skill to the earlier pairs' mean (4 when none),
    choosing at random among the best three.
    """
    candidates = select_candidates(request, constraints, rng)
    pairs = build_pair_catalog(candidates)
    if constraints.pair_unique:
        pairs = drop_used_pairs(pairs, request.used_pair_keys)

    if not pairs:
        return PairSelection(None)

    if request.is_last_point:
        return _pick_last_point_pair(pairs, rng)
    return _pick_ordered_point_pair(pairs, request, constraints, rng)


def find_pair_for_point(
    request: PointRequest,
    rng: random.Random,
    constraints: PointConstraints = STRICT_CONSTRAINTS,
) -> Optional[Pair]:
    """Return a pair for the point, or None if no candidate pair exists."""
    return select_pair(request, rng, constraints).pair
