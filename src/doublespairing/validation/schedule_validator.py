"""Schedule validator: read-only audit of a finished schedule.

Works the same on generated and on manually edited schedules. Violations
are reported as human-readable strings; nothing is raised and nothing is
changed.
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

from collections import OrderedDict
from typing import Dict, Iterable, List, Tuple

from doublespairing.models.match import Match
from doublespairing.models.player import Player
from doublespairing.models.settings import TournamentSettings
from doublespairing.pairing.repair import count_assignments
from doublespairing.utils import setup_logger

logger = setup_logger(__name__)


class ScheduleValidator:
    """Checks the floor, age order, last-point composition and round
    exclusivity rules against a list of matches.

    Only the floor is checked when rule enforcement is off.
    """

    def check_minimum_matches(
        self,
        matches: List[Match],
        players: List[Player],
        settings: TournamentSettings,
    ) -> List[str]:
        counts = count_assignments(matches, players)
        floor = settings.min_matches_per_player
        return [
            f"Player {p.name} (team {p.team}) plays {counts[p.id]} point(s), "
            f"at least {floor} required"
            for p in players
            if counts[p.id] < floor
        ]

    def check_age_order(
        self, matches: List[Match], settings: TournamentSettings
    ) -> List[str]:
        """Each side's total age must strictly rise over the non-last points."""
        errors = []
        for (round_number, team1, team2), group in _group_by_matchup(matches).items():
            ordered = sorted(
                (m for m in group if m.point_number < settings.points_per_round),
                key=lambda m: m.point_number,
            )
            for side, team in ((1, team1), (2, team2)):
                previous = None
                previous_point = 0
                for match in ordered:
                    pair = match.pair_for(side)
                    if pair is None:
                        continue
                    if previous is not None and pair.total_age <= previous.total_age:
                        errors.append(
                            f"R{round_number} {team1}-{team2}: team {team} point "
                            f"{match.point_number} total age {pair.total_age} does "
                            f"not exceed point {previous_point} ({previous.total_age})"
                        )
                    previous, previous_point = pair, match.point_number
        return errors

    def check_last_point_composition(
        self,
        matches: List[Match],
        players: List[Player],
        settings: TournamentSettings,
    ) -> List[str]:
        """Last point must be women's or mixed doubles.

        Only reported for a team that has at least one female player, since
        otherwise no valid pair could have been formed.
        """
        teams_with_women = {p.team for p in players if p.is_female}
        errors = []
        for match in matches:
            if match.point_number != settings.points_per_round:
                continue
            for side in (1, 2):
                pair = match.pair_for(side)
                team = match.team_for(side)
                if pair is None or team not in teams_with_women:
                    continue
                if not pair.is_valid_last_point_pair:
                    errors.append(
                        f"{match.id}: team {team} ({pair}) must play women's "
                        f"or mixed doubles in point {settings.points_per_round}"
                    )
        return errors

    def check_round_exclusivity(self, matches: List[Match]) -> List[str]:
        """A player appears in at most one point per round."""
        appearances: Dict[Tuple[int, str], List[str]] = OrderedDict()
        names: Dict[str, str] = {}
        for match in matches:
            for player in match.players():
                appearances.setdefault((match.round_number, player.id), []).append(
                    match.id
                )
                names[player.id] = player.name
        return [
            f"Round {round_number}: {names[player_id]} plays {len(ids)} points "
            f"({', '.join(ids)})"
            for (round_number, player_id), ids in appearances.items()
            if len(ids) > 1
        ]

    def validate(
        self,
        matches: List[Match],
        players: List[Player],
        settings: TournamentSettings,
    ) -> List[str]:
        """Return every violation; an empty list means fully compliant."""
        errors = self.check_minimum_matches(matches, players, settings)
        if settings.enforce_rules:
            errors.extend(self.check_age_order(matches, settings))
            errors.extend(self.check_last_point_composition(matches, players, settings))
            errors.extend(self.check_round_exclusivity(matches))
        logger.debug("Validation found %s violation(s)", len(errors))
        return errors


def _group_by_matchup(
    matches: Iterable[Match],
) -> "OrderedDict[Tuple[int, str, str], List[Match]]":
    groups: "OrderedDict[Tuple[int, str, str], List[Match]]" = OrderedDict()
    for match in matches:
        groups.setdefault(match.matchup, []).append(match)
    return groups


def find_incomplete_matches(matches: Iterable[Match]) -> List[Match]:
    """Matches with an undetermined side, to be shown as TBD."""
    return [m for m in matches if not m.is_complete]


def create_schedule_validator() -> ScheduleValidator:
    return ScheduleValidator()


def validate_schedule(
    matches: List[Match], players: List[Player], settings: TournamentSettings
) -> List[str]:
    return create_schedule_validator().validate(matches, players, settings)
