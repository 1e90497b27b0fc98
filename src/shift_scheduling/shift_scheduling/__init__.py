"""Shift Scheduling package.

The scheduling rules (shift time policy, conflict detection, skill tags) are
pure functions in ``shifts.validation`` and ``skills.validation``. Feature
modules add service/repository layers and a thin Flask JSON controller.
"""
from .shifts.model import Shift, ShiftTimeSlot
from .shifts.validation import ShiftTimesResult, detect_conflicts, validate_shift_times
from .skills.validation import SkillsResult, parse_skills_input, validate_skills

__all__ = [
    "Shift",
    "ShiftTimeSlot",
    "ShiftTimesResult",
    "SkillsResult",
    "detect_conflicts",
    "parse_skills_input",
    "validate_shift_times",
    "validate_skills",
]
