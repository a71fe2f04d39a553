"""Round generator: fill every matchup and point of one round."""

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
from typing import Dict, List, Mapping, Optional, Set, Tuple

from doublespairing.constants import INTERNAL_MATCHUP_CYCLE, LAST_POINT_FIRST_THRESHOLD
from doublespairing.models.match import Match
from doublespairing.models.pair import Pair
from doublespairing.models.settings import TournamentMode, TournamentSettings
from doublespairing.pairing.point_assignment import PointRequest
from doublespairing.pairing.relaxation import assign_with_relaxation
from doublespairing.type_hints import Teams, UsedPairKeys
from doublespairing.utils import setup_logger

logger = setup_logger(__name__)

Matchup = Tuple[str, str]


@dataclass
class RelaxationEvent:
    """A slot filled only after relaxing a rule."""

    round_number: int
    point_number: int
    team: str
    rung: int
    description: str


@dataclass
class ScheduleGap:
    """A side of a match left without a pair."""

    round_number: int
    point_number: int
    team: str
    opponent: str


@dataclass
class RoundOutcome:
    round_number: int
    matches: List[Match] = field(default_factory=list)
    relaxations: List[RelaxationEvent] = field(default_factory=list)
    gaps: List[ScheduleGap] = field(default_factory=list)


def matchups_for_round(
    round_number: int, settings: TournamentSettings
) -> List[Matchup]:
    """Fixed matchup list of a round.

    Internal mode cycles A-B/C-D, A-C/B-D, A-D/B-C with period three.
    Inter-club mode plays every home team against every away team each
    round.
    """
    if settings.mode is TournamentMode.INTER_CLUB:
        home1, home2 = settings.home_teams
        away1, away2 = settings.away_teams
        return [(home1, away1), (home1, away2), (home2, away1), (home2, away2)]
    cycle_index = (round_number - 1) % len(INTERNAL_MATCHUP_CYCLE)
    return list(INTERNAL_MATCHUP_CYCLE[cycle_index])


def point_order(settings: TournamentSettings) -> List[int]:
    """Order in which a matchup's points are filled.

    With rules enforced and at least five points the last point goes first,
    so its composition is fixed before the age order is built on top.
    """
    points = list(range(1, settings.points_per_round + 1))
    last_first = settings.points_per_round >= LAST_POINT_FIRST_THRESHOLD
    if settings.enforce_rules and last_first:
        return [points[-1]] + points[:-1]
    return points


def generate_round(
    round_number: int,
    teams: Teams,
    settings: TournamentSettings,
    assigned_counts: Mapping[str, int],
    rng: random.Random,
) -> RoundOutcome:
    """Generate all matches of one round.

    ``assigned_counts`` reflects previous rounds only and is not modified.
    Returned matches are ordered by matchup, then point.
    """
    outcome = RoundOutcome(round_number)
    used_pairs: Dict[str, UsedPairKeys] = {team: set() for team in teams}
    used_players: Set[str] = set()

    for team1, team2 in matchups_for_round(round_number, settings):
        by_point: Dict[int, Match] = {}

        for point in point_order(settings):
            match = Match(round_number, point, team1, team2)
            for side, team, opponent in ((1, team1, team2), (2, team2, team1)):
                earlier = [
                    m.pair_for(side)
                    for p, m in sorted(by_point.items())
                    if p < point and m.pair_for(side) is not None
                ]
                pair = _assign_side(
                    outcome,
                    point,
                    team,
                    opponent,
                    PointRequest(
                        point_number=point,
                        team_players=teams.get(team, []),
                        settings=settings,
                        assigned_counts=assigned_counts,
                        used_pair_keys=used_pairs.setdefault(team, set()),
                        earlier_pairs=earlier,
                        used_players=used_players,
                    ),
                    rng,
                )
                match.set_pair(side, pair)

            for side in (1, 2):
                pair = match.pair_for(side)
                if pair is None:
                    continue
                used_pairs[match.team_for(side)].add(pair.key)
                if settings.enforce_rules:
                    used_players.update(pair.key)
            by_point[point] = match

        outcome.matches.extend(m for _, m in sorted(by_point.items()))

    logger.info(
        "Round %s: %s matches, %s relaxed slots, %s gaps",
        round_number,
        len(outcome.matches),
        len(outcome.relaxations),
        len(outcome.gaps),
    )
    return outcome


def _assign_side(
    outcome: RoundOutcome,
    point: int,
    team: str,
    opponent: str,
    request: PointRequest,
    rng: random.Random,
) -> Optional[Pair]:
    result = assign_with_relaxation(request, rng)
    if result.pair is None:
        logger.warning(
            "Round %s point %s: no pair for team %s against %s, left undetermined",
            outcome.round_number,
            point,
            team,
            opponent,
        )
        outcome.gaps.append(ScheduleGap(outcome.round_number, point, team, opponent))
        return None
    if result.relaxed:
        outcome.relaxations.append(
            RelaxationEvent(
                outcome.round_number, point, team, result.rung, result.describe()
            )
        )
    return result.pair
