"""Relaxation ladder: ordered retries that drop one constraint at a time."""

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
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from doublespairing.models.pair import Pair
from doublespairing.pairing.point_assignment import (
    PairSelection,
    PointConstraints,
    PointRequest,
    select_pair,
)
from doublespairing.utils import setup_logger

logger = setup_logger(__name__)

Assigner = Callable[[PointRequest, random.Random, PointConstraints], PairSelection]


@dataclass(frozen=True)
class RelaxationRung:
    """One step of the ladder: a name and the constraints it keeps."""

    level: int
    name: str
    constraints: PointConstraints


DEFAULT_LADDER: Tuple[RelaxationRung, ...] = (
    RelaxationRung(0, "all constraints", PointConstraints()),
    RelaxationRung(
        1,
        "without age order",
        PointConstraints(age_monotonic=False),
    ),
    RelaxationRung(
        2,
        "without round exclusivity",
        PointConstraints(age_monotonic=False, round_exclusive=False),
    ),
    RelaxationRung(
        3,
        "without pair uniqueness",
        PointConstraints(age_monotonic=False, round_exclusive=False, pair_unique=False),
    ),
)


@dataclass
class AssignmentOutcome:
    """Result of running the ladder for one side of one point.

    ``rung`` is the level that produced the pair, or the last level tried
    when ``pair`` is None.
    """

    pair: Optional[Pair]
    rung: int
    rung_name: str = ""
    age_order_relaxed: bool = False
    composition_relaxed: bool = False

    @property
    def relaxed(self) -> bool:
        return self.rung > 0 or self.age_order_relaxed or self.composition_relaxed

    def describe(self) -> str:
        reasons = []
        if self.rung > 0:
            reasons.append(f"rung {self.rung} ({self.rung_name})")
        if self.age_order_relaxed:
            reasons.append("age order filter skipped")
        if self.composition_relaxed:
            reasons.append("no women's or mixed pair available")
        return ", ".join(reasons) or "no relaxation"


def assign_with_relaxation(
    request: PointRequest,
    rng: random.Random,
    ladder: Tuple[RelaxationRung, ...] = DEFAULT_LADDER,
    assigner: Assigner = select_pair,
) -> AssignmentOutcome:
    """Try each rung of ``ladder`` in order until one yields a pair."""
    for rung in ladder:
        selection = assigner(request, rng, rung.constraints)
        if selection.pair is not None:
            if rung.level > 0:
                logger.warning(
                    "Point %s: pair found %s (rung %s)",
                    request.point_number,
                    rung.name,
                    rung.level,
                )
            return AssignmentOutcome(
                pair=selection.pair,
                rung=rung.level,
                rung_name=rung.name,
                age_order_relaxed=selection.age_order_relaxed,
                composition_relaxed=selection.composition_relaxed,
            )
        logger.debug("Point %s: no pair %s, relaxing", request.point_number, rung.name)

    logger.warning(
        "Point %s: no pair found even after relaxing every constraint",
        request.point_number,
    )
    last = ladder[-1] if ladder else DEFAULT_LADDER[0]
    return AssignmentOutcome(pair=None, rung=last.level, rung_name=last.name)
