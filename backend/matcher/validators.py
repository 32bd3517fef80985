"""
Structural validation for caller-supplied project and professional records.

Only shape is checked here. Unknown enumeration values (roles, tiers,
budget brackets) are valid input and fall back to defaults during scoring.
"""

from collections.abc import Mapping
from typing import Any, List

PROFILE_REQUIRED_FIELDS = ["id"]
PROFILE_STR_FIELDS = [
    "primary_role",
    "years_experience",
    "hourly_rate_range",
    "availability",
    "professional_summary",
]
PROFILE_LIST_FIELDS = ["industry_experience"]

PROJECT_STR_FIELDS = [
    "description",
    "industry",
    "budget_range",
    "project_stage",
    "timeline",
]

LIST_TYPES = (list, tuple, set, frozenset)


def _is_blank(v: Any) -> bool:
    return v is None or (isinstance(v, str) and v.strip() == "")


def validate_profile(data: Mapping[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    """
    if not isinstance(data, Mapping):
        return [f"Profile must be a mapping, got {type(data).__name__}"]

    errors: List[str] = []

    for f in PROFILE_REQUIRED_FIELDS:
        if f not in data:
            errors.append(f"Missing required field: {f}")
        elif _is_blank(data[f]):
            errors.append(f"Field '{f}' must not be empty")
        elif not isinstance(data[f], (str, int)) or isinstance(data[f], bool):
            errors.append(f"Field '{f}' must be a string or integer")

    for f in PROFILE_STR_FIELDS:
        if data.get(f) is not None and not isinstance(data[f], str):
            errors.append(f"Field '{f}' must be a string if provided")

    for f in PROFILE_LIST_FIELDS:
        value = data.get(f)
        if value is None:
            continue
        if not isinstance(value, LIST_TYPES):
            errors.append(f"Field '{f}' must be a list if provided")
        elif not all(isinstance(item, str) for item in value):
            errors.append(f"Field '{f}' must contain only strings")

    return errors


def validate_project(data: Mapping[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    """
    if not isinstance(data, Mapping):
        return [f"Project must be a mapping, got {type(data).__name__}"]

    errors: List[str] = []
    for f in PROJECT_STR_FIELDS:
        if data.get(f) is not None and not isinstance(data[f], str):
            errors.append(f"Field '{f}' must be a string if provided")
    return errors
