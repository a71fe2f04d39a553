"""Full schedule generation across all rounds."""

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
from typing import Dict, List, Optional

from doublespairing.models.match import Match
from doublespairing.models.player import Player
from doublespairing.models.settings import TournamentSettings
from doublespairing.pairing.repair import (
    RepairReport,
    count_assignments,
    repair_schedule,
)
from doublespairing.pairing.round_generator import (
    RelaxationEvent,
    ScheduleGap,
    generate_round,
)
from doublespairing.type_hints import AssignedCounts, Teams
from doublespairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class ScheduleResult:
    """A generated schedule plus what it took to build it.

    Attributes
    ----------
    matches : list of Match
        Flat list ordered by round, matchup, point.
    assigned_counts : dict of str to int
        Final points per player id.
    relaxations : list of RelaxationEvent
        Slots filled only after relaxing a rule.
    gaps : list of ScheduleGap
        Sides no rung could fill during generation.
    repair : RepairReport or None
        What the repair pass changed, when it ran.
    """

    matches: List[Match]
    assigned_counts: AssignedCounts
    relaxations: List[RelaxationEvent] = field(default_factory=list)
    gaps: List[ScheduleGap] = field(default_factory=list)
    repair: Optional[RepairReport] = None

    @property
    def shortfalls(self) -> Dict[str, int]:
        """Players (by id) still below the floor."""
        return self.repair.shortfalls if self.repair else {}


def generate_schedule(
    teams: Teams,
    settings: TournamentSettings,
    rng: Optional[random.Random] = None,
    repair: bool = True,
) -> ScheduleResult:
    """Generate every round, then run the repair pass.

    Parameters
    ----------
    teams : dict of str to list of Player
        Roster by team slot. Players are never modified.
    settings : TournamentSettings
        Tournament settings.
    rng : random.Random, optional
        Random source; a freshly seeded one when omitted. Pass a seeded
        instance for reproducible schedules.
    repair : bool
        Whether to run the post-generation repair pass.
    """
    rng = rng if rng is not None else random.Random()
    roster: List[Player] = [p for players in teams.values() for p in players]
    assigned_counts: AssignedCounts = {p.id: 0 for p in roster}
    result = ScheduleResult(matches=[], assigned_counts=assigned_counts)

    for round_number in range(1, settings.total_rounds + 1):
        outcome = generate_round(round_number, teams, settings, assigned_counts, rng)
        result.matches.extend(outcome.matches)
        result.relaxations.extend(outcome.relaxations)
        result.gaps.extend(outcome.gaps)
        for match in outcome.matches:
            for player in match.players():
                assigned_counts[player.id] = assigned_counts.get(player.id, 0) + 1

    if repair:
        result.repair = repair_schedule(result.matches, teams, settings)
        result.assigned_counts = result.repair.assigned_counts
    else:
        result.assigned_counts = count_assignments(result.matches, roster)

    logger.info(
        "Generated %s matches over %s rounds (%s relaxed slots, %s gaps, "
        "%s players below the floor)",
        len(result.matches),
        settings.total_rounds,
        len(result.relaxations),
        len(result.gaps),
        len(result.shortfalls),
    )
    return result


def generate_full_schedule(
    teams: Teams,
    settings: TournamentSettings,
    rng: Optional[random.Random] = None,
) -> List[Match]:
    """Generate and repair a schedule, returning only the flat match list."""
    return generate_schedule(teams, settings, rng).matches
