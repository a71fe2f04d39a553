"""Validation helpers for roster fields.

Each validator returns a :class:`ValidationResult` carrying the sanitized
value, so callers can either inspect the result or pass it to
:func:`require_valid`, which raises.
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

from typing import Any, Optional

from doublespairing.constants import SKILL_WEIGHTS, TEAM_SLOTS
from doublespairing.exceptions import InvalidPlayerDataException

MIN_AGE = 5
MAX_AGE = 110

# Accepted spellings for each gender, normalized to "M" / "F"
GENDER_ALIASES = {
    "m": "M",
    "male": "M",
    "man": "M",
    "男": "M",
    "f": "F",
    "female": "F",
    "woman": "F",
    "女": "F",
}


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Age Validation ==========


def validate_age(age: Any) -> ValidationResult:
    """Validate an age in whole years.

    Example:
        >>> validate_age("42").sanitized_value
        42
    """
    if isinstance(age, bool):
        return ValidationResult(False, f"Invalid age: {age!r}")
    try:
        value = int(age)
    except (TypeError, ValueError):
        return ValidationResult(False, f"Invalid age: {age!r}")

    if value != age and not (isinstance(age, str) and age.strip() == str(value)):
        return ValidationResult(False, f"Age must be a whole number: {age!r}")

    if not MIN_AGE <= value <= MAX_AGE:
        return ValidationResult(
            False, f"Age {value} outside allowed range {MIN_AGE}-{MAX_AGE}"
        )
    return ValidationResult(True, sanitized_value=value)


# ========== Gender Validation ==========


def validate_gender(gender: Any) -> ValidationResult:
    """Validate a gender value and normalize it to ``"M"`` or ``"F"``."""
    if not isinstance(gender, str) or not gender.strip():
        return ValidationResult(False, "Gender is required")
    normalized = GENDER_ALIASES.get(gender.strip().lower())
    if normalized is None:
        return ValidationResult(False, f"Unknown gender: {gender!r}")
    return ValidationResult(True, sanitized_value=normalized)


# ========== Skill / Team Validation ==========


def validate_skill_tier(skill: Any) -> ValidationResult:
    """Validate a skill tier letter (A, B or C)."""
    if not isinstance(skill, str) or skill.strip().upper() not in SKILL_WEIGHTS:
        return ValidationResult(
            False,
            f"Invalid skill tier {skill!r}; expected one of "
            f"{', '.join(sorted(SKILL_WEIGHTS))}",
        )
    return ValidationResult(True, sanitized_value=skill.strip().upper())


def validate_team(team: Any) -> ValidationResult:
    """Validate a team slot identifier."""
    if not isinstance(team, str) or team.strip().upper() not in TEAM_SLOTS:
        return ValidationResult(
            False,
            f"Invalid team {team!r}; expected one of {', '.join(TEAM_SLOTS)}",
        )
    return ValidationResult(True, sanitized_value=team.strip().upper())


def require_valid(result: ValidationResult, field_name: str) -> Any:
    """Return the sanitized value or raise ``InvalidPlayerDataException``."""
    if not result.is_valid:
        raise InvalidPlayerDataException(f"{field_name}: {result.error_message}")
    return result.sanitized_value
