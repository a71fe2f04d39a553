"""Manual assignment: empty round templates and hand-picked pairs."""

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

from typing import List, Mapping, Sequence

from doublespairing.exceptions import InvalidPairingException, PlayerNotFoundException
from doublespairing.models.match import Match
from doublespairing.models.pair import Pair
from doublespairing.models.player import Player
from doublespairing.models.settings import TournamentSettings
from doublespairing.pairing.round_generator import matchups_for_round
from doublespairing.type_hints import Side
from doublespairing.utils import setup_logger

logger = setup_logger(__name__)


def create_round_template(
    round_number: int, settings: TournamentSettings
) -> List[Match]:
    """Scheduled matches for every matchup and point, all sides undetermined."""
    return [
        Match(round_number, point, team1, team2)
        for team1, team2 in matchups_for_round(round_number, settings)
        for point in range(1, settings.points_per_round + 1)
    ]


def create_schedule_template(settings: TournamentSettings) -> List[Match]:
    matches: List[Match] = []
    for round_number in range(1, settings.total_rounds + 1):
        matches.extend(create_round_template(round_number, settings))
    return matches


def assign_manual_pair(
    match: Match,
    side: Side,
    player_ids: Sequence[str],
    players_by_id: Mapping[str, Player],
) -> Pair:
    """Set one side of ``match`` from two player ids.

    Raises:
        PlayerNotFoundException: If an id is not on the roster
        InvalidPairingException: If the players are the same, or not on the
            team playing that side
    """
    if len(player_ids) != 2:
        raise InvalidPairingException(
            f"A pair needs exactly two players, got {len(player_ids)}"
        )
    try:
        first, second = (players_by_id[pid] for pid in player_ids)
    except KeyError as e:
        raise PlayerNotFoundException(f"Unknown player id {e.args[0]}") from e

    team = match.team_for(side)
    for player in (first, second):
        if player.team != team:
            raise InvalidPairingException(
                f"{player.name} plays for team {player.team}, not team {team}"
            )

    pair = Pair(first, second)
    match.set_pair(side, pair)
    logger.debug("%s: team %s set manually to %s", match.id, team, pair)
    return pair


def clear_manual_pair(match: Match, side: Side) -> None:
    match.set_pair(side, None)
