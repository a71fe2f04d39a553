"""Post-generation repair: raise under-floor players by substitution.

The pass is greedy and single-pass. Pathological rosters can leave players
below the floor; those are reported, never hidden. Patched matches are not
re-validated: slots that keep the rules intact are preferred, but reaching
the floor wins over the age, skill and composition rules of the patched
match.
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

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from doublespairing.models.match import Match
from doublespairing.models.pair import Pair
from doublespairing.models.player import Player
from doublespairing.models.settings import TournamentSettings
from doublespairing.type_hints import AssignedCounts, Side, Teams
from doublespairing.utils import setup_logger

logger = setup_logger(__name__)

RULE_ROUND_EXCLUSIVITY = "round exclusivity"
RULE_AGE_ORDER = "age order"
RULE_COMPOSITION = "last point composition"
RULE_PAIR_REPEATED = "pair repeated"


@dataclass
class Substitution:
    """One player swapped into an existing slot."""

    match_id: str
    team: str
    donor: Player
    recipient: Player
    rules_broken: List[str] = field(default_factory=list)


@dataclass
class RepairReport:
    assigned_counts: AssignedCounts
    substitutions: List[Substitution] = field(default_factory=list)
    filled_gaps: List[str] = field(default_factory=list)
    unfilled_gaps: List[str] = field(default_factory=list)
    # player id -> count, for players still below the floor
    shortfalls: Dict[str, int] = field(default_factory=dict)


def count_assignments(
    matches: Iterable[Match], players: Iterable[Player] = ()
) -> AssignedCounts:
    """Points per player id; roster players without any point count as 0."""
    counts: AssignedCounts = {p.id: 0 for p in players}
    for match in matches:
        for player in match.players():
            counts[player.id] = counts.get(player.id, 0) + 1
    return counts


def repair_schedule(
    matches: List[Match], teams: Teams, settings: TournamentSettings
) -> RepairReport:
    """Fill undetermined sides, then lift under-floor players by substitution.

    ``matches`` is patched in place.
    """
    roster = [p for players in teams.values() for p in players]
    counts = count_assignments(matches, roster)
    report = RepairReport(assigned_counts=counts)
    floor = settings.min_matches_per_player

    _fill_gaps(matches, teams, counts, report)

    for team, players in teams.items():
        for recipient in sorted(players, key=lambda p: counts[p.id]):
            while counts[recipient.id] < floor:
                candidate = _best_slot(recipient, team, matches, counts, settings)
                if candidate is None:
                    break
                match, side, donor, new_pair, broken = candidate
                match.set_pair(side, new_pair)
                counts[donor.id] -= 1
                counts[recipient.id] += 1
                report.substitutions.append(
                    Substitution(match.id, team, donor, recipient, broken)
                )
                logger.info(
                    "%s: %s replaces %s to reach the floor%s",
                    match.id,
                    recipient.name,
                    donor.name,
                    f" (breaks {', '.join(broken)})" if broken else "",
                )

    for player in roster:
        if counts[player.id] < floor:
            report.shortfalls[player.id] = counts[player.id]
            logger.warning(
                "%s (team %s) remains below the floor: %s of %s",
                player.name,
                player.team,
                counts[player.id],
                floor,
            )
    return report


def _fill_gaps(
    matches: List[Match], teams: Teams, counts: AssignedCounts, report: RepairReport
) -> None:
    for match in matches:
        for side in (1, 2):
            if match.pair_for(side) is not None:
                continue
            team = match.team_for(side)
            players = teams.get(team, [])
            if len(players) < 2:
                report.unfilled_gaps.append(f"{match.id} team {team}")
                logger.warning(
                    "%s: team %s has fewer than two players, side stays undetermined",
                    match.id,
                    team,
                )
                continue
            in_round = _players_in_round(matches, match.round_number)
            first, second = sorted(
                players, key=lambda p: (p.id in in_round, counts[p.id])
            )[:2]
            match.set_pair(side, Pair(first, second))
            counts[first.id] += 1
            counts[second.id] += 1
            report.filled_gaps.append(f"{match.id} team {team}")
            logger.info(
                "%s: filled team %s with %s", match.id, team, match.pair_for(side)
            )


def _best_slot(
    recipient: Player,
    team: str,
    matches: List[Match],
    counts: AssignedCounts,
    settings: TournamentSettings,
) -> Optional[Tuple[Match, Side, Player, Pair, List[str]]]:
    """Cheapest slot held by a teammate above the floor.

    Slots are ranked by how many rules the swap would break, then by how
    much it moves the pair's total age.
    """
    floor = settings.min_matches_per_player
    best = None
    best_rank = None
    for match in matches:
        for side in (1, 2):
            pair = match.pair_for(side)
            if match.team_for(side) != team or pair is None or pair.includes(recipient):
                continue
            for donor in pair.players:
                if counts.get(donor.id, 0) <= floor:
                    continue
                new_pair = pair.replace(donor, recipient)
                broken = _rules_broken(
                    match, side, recipient, new_pair, matches, settings
                )
                rank = (len(broken), abs(new_pair.total_age - pair.total_age))
                if best_rank is None or rank < best_rank:
                    best = (match, side, donor, new_pair, broken)
                    best_rank = rank
    return best


def _players_in_round(
    matches: List[Match], round_number: int, skip: Optional[Match] = None
) -> set:
    return {
        p.id
        for m in matches
        if m.round_number == round_number and m is not skip
        for p in m.players()
    }


def _rules_broken(
    match: Match,
    side: Side,
    recipient: Player,
    new_pair: Pair,
    matches: List[Match],
    settings: TournamentSettings,
) -> List[str]:
    broken = []
    if recipient.id in _players_in_round(matches, match.round_number, skip=match):
        broken.append(RULE_ROUND_EXCLUSIVITY)

    team = match.team_for(side)
    team_pairs = {
        m.pair_for(s).key
        for m in matches
        if m.round_number == match.round_number and m is not match
        for s in (1, 2)
        if m.team_for(s) == team and m.pair_for(s) is not None
    }
    if new_pair.key in team_pairs:
        broken.append(RULE_PAIR_REPEATED)

    if match.point_number == settings.points_per_round:
        if not new_pair.is_valid_last_point_pair:
            broken.append(RULE_COMPOSITION)
    elif not _age_order_holds(match, side, new_pair, matches, settings):
        broken.append(RULE_AGE_ORDER)
    return broken


def _age_order_holds(
    match: Match,
    side: Side,
    new_pair: Pair,
    matches: List[Match],
    settings: TournamentSettings,
) -> bool:
    ages = []
    for m in sorted(matches, key=lambda m: m.point_number):
        if m.matchup != match.matchup or m.point_number >= settings.points_per_round:
            continue
        pair = new_pair if m is match else m.pair_for(side)
        if pair is not None:
            ages.append(pair.total_age)
    return all(later > earlier for earlier, later in zip(ages, ages[1:]))
