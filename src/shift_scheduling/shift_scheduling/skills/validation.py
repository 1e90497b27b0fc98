"""Parsing and validation of free-text skill tags.

Skills are stored in canonical form: trimmed, uppercase, 2-50 characters of
letters, digits, spaces and hyphens, starting with a letter or digit.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List

from ..core.constants import SKILL_MAX_LENGTH, SKILL_MIN_LENGTH, SKILL_PATTERN

_SKILL_RE = re.compile(SKILL_PATTERN)


@dataclass(frozen=True)
class SkillsResult:
    valid: bool
    errors: List[str] = field(default_factory=list)
    normalized: List[str] = field(default_factory=list)


def parse_skills_input(raw: str) -> List[str]:
    """Split a comma separated form value into trimmed, non-empty pieces."""
    return [piece.strip() for piece in (raw or "").split(",") if piece.strip()]


def skill_rule_violations(skill: str) -> List[str]:
    """Messages for every canonical-form rule ``skill`` breaks."""
    problems: List[str] = []
    if len(skill) < SKILL_MIN_LENGTH:
        problems.append(f"Skill must be at least {SKILL_MIN_LENGTH} characters")
    if len(skill) > SKILL_MAX_LENGTH:
        problems.append(f"Skill must be at most {SKILL_MAX_LENGTH} characters")
    if not _SKILL_RE.match(skill):
        problems.append("Skill must contain only uppercase letters, numbers, spaces, and hyphens")
    return problems


def validate_skills(skills: Iterable[str]) -> SkillsResult:
    """Normalize skills to uppercase, drop blanks and reject duplicates.

    The first occurrence of a skill wins; later case-insensitive repeats are
    reported as duplicates. Every problem is collected.
    """
    errors: List[str] = []
    seen: set[str] = set()
    normalized: List[str] = []

    for raw in skills:
        trimmed = raw.strip()
        if not trimmed:
            continue

        upper = trimmed.upper()

        if upper in seen:
            errors.append(f'Duplicate skill: "{upper}"')
            continue

        problems = skill_rule_violations(upper)
        if problems:
            errors.extend(f'Skill "{upper}": {p}' for p in problems)
            continue

        seen.add(upper)
        normalized.append(upper)

    return SkillsResult(valid=not errors, errors=errors, normalized=normalized)
