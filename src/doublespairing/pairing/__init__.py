"""Doubles pairing engine.

Builds a round-by-round doubles schedule for four team slots, point by
point, under ordering, composition, uniqueness and floor rules.
"""

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

from doublespairing.pairing.eligibility import is_eligible, soft_ceiling
from doublespairing.pairing.manual import (
    assign_manual_pair,
    create_round_template,
    create_schedule_template,
)
from doublespairing.pairing.pair_catalog import build_pair_catalog, pair_key
from doublespairing.pairing.point_assignment import (
    PointConstraints,
    PointRequest,
    find_pair_for_point,
    select_pair,
)
from doublespairing.pairing.relaxation import (
    DEFAULT_LADDER,
    AssignmentOutcome,
    RelaxationRung,
    assign_with_relaxation,
)
from doublespairing.pairing.repair import (
    RepairReport,
    count_assignments,
    repair_schedule,
)
from doublespairing.pairing.round_generator import (
    generate_round,
    matchups_for_round,
    point_order,
)
from doublespairing.pairing.schedule import (
    ScheduleResult,
    generate_full_schedule,
    generate_schedule,
)

__all__ = [
    "build_pair_catalog",
    "pair_key",
    "is_eligible",
    "soft_ceiling",
    "PointConstraints",
    "PointRequest",
    "find_pair_for_point",
    "select_pair",
    "DEFAULT_LADDER",
    "RelaxationRung",
    "AssignmentOutcome",
    "assign_with_relaxation",
    "matchups_for_round",
    "point_order",
    "generate_round",
    "generate_schedule",
    "generate_full_schedule",
    "ScheduleResult",
    "repair_schedule",
    "count_assignments",
    "RepairReport",
    "create_round_template",
    "create_schedule_template",
    "assign_manual_pair",
]
