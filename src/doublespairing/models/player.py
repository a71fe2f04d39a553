"""Player model for the doubles roster."""

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

from __future__ import annotations

from datetime import date
from enum import Enum
from functools import total_ordering
from typing import Any, Dict, Optional

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from doublespairing.constants import SKILL_WEIGHTS
from doublespairing.exceptions import InvalidPlayerDataException
from doublespairing.utils import generate_id, setup_logger
from doublespairing.utils.validation import (
    require_valid,
    validate_age,
    validate_gender,
    validate_skill_tier,
    validate_team,
)

logger = setup_logger(__name__)


class Gender(Enum):
    """Gender, used only for the doubles composition rules."""

    MALE = "M"
    FEMALE = "F"


@total_ordering
class SkillTier(Enum):
    """Skill tier, ordered C < B < A."""

    A = "A"
    B = "B"
    C = "C"

    @property
    def weight(self) -> int:
        """Numeric weight used for pair skill scores (A=3, B=2, C=1)."""
        return SKILL_WEIGHTS[self.value]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SkillTier):
            return NotImplemented
        return self.weight < other.weight


def age_from_date_of_birth(date_of_birth: date, on: Optional[date] = None) -> int:
    """Age in whole years on the given day (defaults to today)."""
    return relativedelta(on or date.today(), date_of_birth).years


class Player:
    """A rostered player.

    The scheduler only reads ``age``, ``gender``, ``skill`` and ``team``.
    ``matches_played`` belongs to the caller and is never touched while a
    schedule is being generated; the running counts live in a separate map.

    Attributes:
        id: Unique identifier for the player
        name: Display name
        age: Age in whole years
        gender: Gender used for last-point composition
        skill: Skill tier
        team: Team slot ("A".."D")
        date_of_birth: Optional date of birth the age was derived from
        matches_played: Matches committed so far (caller owned)
    """

    def __init__(
        self,
        name: str,
        age: Optional[int] = None,
        gender: Gender = Gender.MALE,
        skill: SkillTier = SkillTier.B,
        team: str = "A",
        date_of_birth: Optional[date] = None,
        player_id: Optional[str] = None,
        matches_played: int = 0,
    ) -> None:
        self.id: str = player_id or generate_id(self.__class__.__name__)
        self.name: str = name
        self.gender: Gender = gender
        self.skill: SkillTier = skill
        self.team: str = team
        self.date_of_birth: Optional[date] = date_of_birth
        self.matches_played: int = matches_played

        if age is None:
            if date_of_birth is None:
                raise InvalidPlayerDataException(
                    f"Player {name!r} needs an age or a date of birth"
                )
            age = age_from_date_of_birth(date_of_birth)
        self.age: int = age

    @property
    def is_female(self) -> bool:
        return self.gender is Gender.FEMALE

    @property
    def skill_weight(self) -> int:
        return self.skill.weight

    def __repr__(self) -> str:
        return (
            f"Player({self.name!r}, age={self.age}, gender={self.gender.value}, "
            f"skill={self.skill.value}, team={self.team})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "gender": self.gender.value,
            "skill": self.skill.value,
            "team": self.team,
            "date_of_birth": (
                self.date_of_birth.isoformat() if self.date_of_birth else None
            ),
            "matches_played": self.matches_played,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize and validate a player from a dictionary.

        Either ``age`` or ``date_of_birth`` (ISO date) must be present.

        Raises:
            InvalidPlayerDataException: If a field is missing or invalid
        """
        name = str(data.get("name") or "").strip()
        if not name:
            raise InvalidPlayerDataException("name: Player name is required")

        date_of_birth = None
        raw_dob = data.get("date_of_birth")
        if raw_dob:
            try:
                date_of_birth = isoparse(str(raw_dob)).date()
            except ValueError as e:
                raise InvalidPlayerDataException(
                    f"date_of_birth: Invalid date {raw_dob!r}"
                ) from e

        age = None
        if data.get("age") is not None:
            age = require_valid(validate_age(data["age"]), "age")
        elif date_of_birth is None:
            raise InvalidPlayerDataException(
                f"Player {name!r} needs an age or a date of birth"
            )

        player = cls(
            name=name,
            age=age,
            gender=Gender(require_valid(validate_gender(data.get("gender")), "gender")),
            skill=SkillTier(
                require_valid(validate_skill_tier(data.get("skill", "B")), "skill")
            ),
            team=require_valid(validate_team(data.get("team")), "team"),
            date_of_birth=date_of_birth,
            player_id=data.get("id"),
            matches_played=int(data.get("matches_played", 0)),
        )
        logger.debug("Loaded %r", player)
        return player
