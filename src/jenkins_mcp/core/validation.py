"""Argument checks shared by the tool handlers. All raise JenkinsValidationError."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .errors import JenkinsValidationError


def _as_int(value: Any) -> Optional[int]:
    # bool is an int subclass; JSON numbers may arrive as 3.0
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def require_non_empty_string(args: Mapping[str, Any], field: str) -> str:
    value = args.get(field)
    if not isinstance(value, str) or not value.strip():
        raise JenkinsValidationError(field, "is required and must be a non-empty string")
    return value


def require_positive_int(args: Mapping[str, Any], field: str) -> int:
    value = _as_int(args.get(field))
    if value is None or value <= 0:
        raise JenkinsValidationError(field, "must be a positive integer")
    return value


def require_non_negative_int(args: Mapping[str, Any], field: str) -> int:
    value = _as_int(args.get(field))
    if value is None or value < 0:
        raise JenkinsValidationError(field, "must be a non-negative integer")
    return value


def optional_string(args: Mapping[str, Any], field: str) -> Optional[str]:
    """Trimmed string, or None when missing or blank."""
    value = args.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise JenkinsValidationError(field, "must be a string")
    value = value.strip()
    return value or None


def optional_string_map(args: Mapping[str, Any], field: str) -> Optional[Dict[str, str]]:
    value = args.get(field)
    if value is None:
        return None
    if not isinstance(value, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise JenkinsValidationError(field, "must be an object with string values")
    return dict(value) or None


__all__ = [
    "require_non_empty_string",
    "require_positive_int",
    "require_non_negative_int",
    "optional_string",
    "optional_string_map",
]
