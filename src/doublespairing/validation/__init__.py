from doublespairing.validation.schedule_validator import (
    ScheduleValidator,
    create_schedule_validator,
    find_incomplete_matches,
    validate_schedule,
)

__all__ = [
    "ScheduleValidator",
    "create_schedule_validator",
    "find_incomplete_matches",
    "validate_schedule",
]
