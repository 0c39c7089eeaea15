"""
Pre-flight parameter checks for command builders.

Each helper performs a single check and raises ``InvalidParametersError``
before any argument vector is built or any process is spawned.
"""

from __future__ import annotations

from typing import Any, Sized

from .errors import InvalidParametersError


def require(condition: bool, error: Exception) -> None:
    """Raise the provided exception when the condition fails."""
    if not condition:
        raise error


def _is_set(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return True


def require_exactly_one(**named: Any) -> str:
    """
    Ensure exactly one of the keyword arguments is set and return its name.

    ``None`` and blank strings count as unset.
    """
    present = [name for name, value in named.items() if _is_set(value)]
    choices = " or ".join(named)
    require(len(present) == 1, InvalidParametersError(f"Exactly one of {choices} must be provided"))
    return present[0]


def require_at_most_one(**named: Any) -> None:
    """Ensure no more than one of the keyword arguments is set."""
    present = [name for name, value in named.items() if _is_set(value)]
    require(
        len(present) <= 1,
        InvalidParametersError(f"Only one of {', '.join(named)} may be provided (got {', '.join(present)})"),
    )


def require_same_length(left: Sized, right: Sized, left_name: str, right_name: str) -> None:
    """Ensure two parallel sequences line up element for element."""
    require(
        len(left) == len(right),
        InvalidParametersError(f"{left_name} and {right_name} must have the same length ({len(left)} != {len(right)})"),
    )


def require_non_empty(value: Sized, field_name: str) -> None:
    require(len(value) > 0, InvalidParametersError(f"{field_name} cannot be empty"))


__all__ = [
    "require",
    "require_at_most_one",
    "require_exactly_one",
    "require_non_empty",
    "require_same_length",
]
