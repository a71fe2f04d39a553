"""Match data class."""

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

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from doublespairing.constants import (
    STATUS_COMPLETED,
    STATUS_IN_PROGRESS,
    STATUS_SCHEDULED,
)
from doublespairing.exceptions import InvalidMatchException, PlayerNotFoundException
from doublespairing.models.pair import Pair
from doublespairing.models.player import Player
from doublespairing.type_hints import Side


class MatchStatus(Enum):
    """Lifecycle of a match; the scheduler only creates SCHEDULED ones."""

    SCHEDULED = STATUS_SCHEDULED
    IN_PROGRESS = STATUS_IN_PROGRESS
    COMPLETED = STATUS_COMPLETED


def match_id(round_number: int, team1: str, team2: str, point_number: int) -> str:
    return f"R{round_number}-{team1}-{team2}-P{point_number}"


@dataclass
class Match:
    """One doubles point between two teams.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    point_number : int
        Point index within the matchup (1-indexed).
    team1, team2 : str
        Opposing team slots.
    pair1, pair2 : Pair or None
        Pair for each side; None means "to be determined".
    team1_games, team2_games : int
        Game counters, owned by score entry once the match exists.
    status : MatchStatus
        Lifecycle status.
    winner : str or None
        Winning team slot, set only once completed.
    """

    round_number: int
    point_number: int
    team1: str
    team2: str
    pair1: Optional[Pair] = None
    pair2: Optional[Pair] = None
    team1_games: int = 0
    team2_games: int = 0
    status: MatchStatus = MatchStatus.SCHEDULED
    winner: Optional[str] = None

    @property
    def id(self) -> str:
        return match_id(self.round_number, self.team1, self.team2, self.point_number)

    @property
    def matchup(self) -> tuple:
        return (self.round_number, self.team1, self.team2)

    @property
    def is_complete(self) -> bool:
        """Both sides have a pair."""
        return self.pair1 is not None and self.pair2 is not None

    def team_for(self, side: Side) -> str:
        if side == 1:
            return self.team1
        if side == 2:
            return self.team2
        raise InvalidMatchException(f"Unknown side {side!r}")

    def pair_for(self, side: Side) -> Optional[Pair]:
        if side == 1:
            return self.pair1
        if side == 2:
            return self.pair2
        raise InvalidMatchException(f"Unknown side {side!r}")

    def set_pair(self, side: Side, pair: Optional[Pair]) -> None:
        if side == 1:
            self.pair1 = pair
        elif side == 2:
            self.pair2 = pair
        else:
            raise InvalidMatchException(f"Unknown side {side!r}")

    def players(self) -> List[Player]:
        """All assigned players, skipping undetermined sides."""
        result: List[Player] = []
        for pair in (self.pair1, self.pair2):
            if pair is not None:
                result.extend(pair.players)
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary; pairs are stored as player ids."""

        def _pair_ids(pair: Optional[Pair]) -> Optional[List[str]]:
            return [pair.player1.id, pair.player2.id] if pair else None

        return {
            "id": self.id,
            "round_number": self.round_number,
            "point_number": self.point_number,
            "team1": self.team1,
            "team2": self.team2,
            "pair1": _pair_ids(self.pair1),
            "pair2": _pair_ids(self.pair2),
            "team1_games": self.team1_games,
            "team2_games": self.team2_games,
            "status": self.status.value,
            "winner": self.winner,
        }

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], players_by_id: Mapping[str, Player]
    ) -> "Match":
        """Deserialize a match, resolving pair player ids against the roster.

        Raises:
            PlayerNotFoundException: If a pair references an unknown player
        """

        def _resolve(ids: Optional[List[str]]) -> Optional[Pair]:
            if not ids:
                return None
            try:
                return Pair(players_by_id[ids[0]], players_by_id[ids[1]])
            except KeyError as e:
                raise PlayerNotFoundException(
                    f"Match {data.get('id', '?')} references unknown player {e.args[0]}"
                ) from e

        return cls(
            round_number=data["round_number"],
            point_number=data["point_number"],
            team1=data["team1"],
            team2=data["team2"],
            pair1=_resolve(data.get("pair1")),
            pair2=_resolve(data.get("pair2")),
            team1_games=data.get("team1_games", 0),
            team2_games=data.get("team2_games", 0),
            status=MatchStatus(data.get("status", STATUS_SCHEDULED)),
            winner=data.get("winner"),
        )
