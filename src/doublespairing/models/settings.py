"""TournamentSettings data class."""

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
from typing import Any, Dict, Optional, Tuple

from doublespairing.constants import (
    DEFAULT_AWAY_TEAMS,
    DEFAULT_HOME_TEAMS,
    DEFAULT_PLAYERS_PER_TEAM,
    DEFAULT_POINTS_PER_ROUND,
    DEFAULT_TOTAL_ROUNDS,
    TEAM_SLOTS,
)
from doublespairing.exceptions import InvalidConfigurationException


class TournamentMode(Enum):
    """How the four team slots meet each other."""

    INTERNAL = "internal"  # 4-team round robin, two matchups per round
    INTER_CLUB = "inter_club"  # home club vs away club, four matchups per round


def derive_min_matches(
    players_per_team: int,
    points_per_round: int,
    total_rounds: int,
    mode: TournamentMode = TournamentMode.INTERNAL,
) -> int:
    """Minimum points every player must be scheduled for.

    A team fills ``total_rounds * points_per_round * 2`` slots per matchup
    it plays each round; the floor is that share per rostered player,
    rounded down, and never below one.
    """
    matchups_per_team = 2 if mode is TournamentMode.INTER_CLUB else 1
    slots = total_rounds * points_per_round * 2 * matchups_per_team
    return max(1, slots // players_per_team)


@dataclass
class TournamentSettings:
    """Tournament configuration settings.

    Attributes
    ----------
    players_per_team : int
        Minimum roster size per team; also the divisor of the derived floor.
    points_per_round : int
        Doubles points played in each matchup.
    total_rounds : int
        Number of rounds.
    min_matches_per_player : int or None
        Floor of points per player. Derived from the other counts when None.
    enforce_rules : bool
        When False the ordering and composition rules are preferences only
        and round exclusivity is not tracked.
    mode : TournamentMode
        Internal round robin or inter-club cross play.
    home_teams, away_teams : tuple of str
        Team slots forming the two clubs in inter-club mode.
    """

    players_per_team: int = DEFAULT_PLAYERS_PER_TEAM
    points_per_round: int = DEFAULT_POINTS_PER_ROUND
    total_rounds: int = DEFAULT_TOTAL_ROUNDS
    min_matches_per_player: Optional[int] = None
    enforce_rules: bool = True
    mode: TournamentMode = TournamentMode.INTERNAL
    home_teams: Tuple[str, str] = DEFAULT_HOME_TEAMS
    away_teams: Tuple[str, str] = DEFAULT_AWAY_TEAMS

    def __post_init__(self):
        for name in ("players_per_team", "points_per_round", "total_rounds"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise InvalidConfigurationException(
                    f"{name} must be a positive integer, got {value!r}"
                )

        if isinstance(self.mode, str):
            self.mode = TournamentMode(self.mode)

        self.home_teams = tuple(self.home_teams)
        self.away_teams = tuple(self.away_teams)
        clubs = self.home_teams + self.away_teams
        if (
            len(self.home_teams) != 2
            or len(self.away_teams) != 2
            or sorted(clubs) != sorted(TEAM_SLOTS)
        ):
            raise InvalidConfigurationException(
                "home_teams and away_teams must split the slots "
                f"{', '.join(TEAM_SLOTS)} into two clubs of two"
            )

        if self.min_matches_per_player is None:
            self.min_matches_per_player = derive_min_matches(
                self.players_per_team,
                self.points_per_round,
                self.total_rounds,
                self.mode,
            )
        elif self.min_matches_per_player < 0:
            raise InvalidConfigurationException(
                "min_matches_per_player cannot be negative"
            )

    @property
    def last_point(self) -> int:
        return self.points_per_round

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "players_per_team": self.players_per_team,
            "points_per_round": self.points_per_round,
            "total_rounds": self.total_rounds,
            "min_matches_per_player": self.min_matches_per_player,
            "enforce_rules": self.enforce_rules,
            "mode": self.mode.value,
            "home_teams": list(self.home_teams),
            "away_teams": list(self.away_teams),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentSettings":
        """Deserialize configuration from dictionary."""
        try:
            mode = TournamentMode(data.get("mode", TournamentMode.INTERNAL.value))
        except ValueError as e:
            raise InvalidConfigurationException(
                f"Unknown tournament mode: {data.get('mode')!r}"
            ) from e
        return cls(
            players_per_team=data.get("players_per_team", DEFAULT_PLAYERS_PER_TEAM),
            points_per_round=data.get("points_per_round", DEFAULT_POINTS_PER_ROUND),
            total_rounds=data.get("total_rounds", DEFAULT_TOTAL_ROUNDS),
            min_matches_per_player=data.get("min_matches_per_player"),
            enforce_rules=data.get("enforce_rules", True),
            mode=mode,
            home_teams=tuple(data.get("home_teams", DEFAULT_HOME_TEAMS)),
            away_teams=tuple(data.get("away_teams", DEFAULT_AWAY_TEAMS)),
        )
