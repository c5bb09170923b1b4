"""Shared argument checks used by creature constructors, mutators and actions.

Every check raises InvalidArgumentError (or a subclass) at the point of the
call and returns the validated value so it can be assigned inline.
"""

from datetime import date
from typing import Any

from .data import DateLike, to_date, is_in_future
from .errors import InvalidArgumentError


def validate_name(name: Any) -> str:
    """Validate that a name is a non-blank string."""
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError("Name must not be None or blank.", argument="name")
    return name


def validate_date_of_birth(date_of_birth: DateLike) -> date:
    """Validate that a birth date is present and not in the future.

    Returns:
        The birth date normalized to a plain date
    """
    if date_of_birth is None:
        raise InvalidArgumentError("Date of birth must not be None.", argument="date_of_birth")

    try:
        birth = to_date(date_of_birth)
    except TypeError as e:
        raise InvalidArgumentError(str(e), argument="date_of_birth") from e

    if is_in_future(date_of_birth):
        raise InvalidArgumentError(
            f"Date of birth must not be in the future: {birth.isoformat()}",
            argument="date_of_birth",
        )
    return birth


def validate_int(value: Any, argument: str) -> int:
    """Validate that a value is a real integer (bools are rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{argument} must be an integer, got {type(value).__name__}",
            argument=argument,
        )
    return value


def validate_in_range(value: Any, minimum: int, maximum: int, argument: str) -> int:
    """Validate that an integer lies within [minimum, maximum]."""
    validate_int(value, argument)
    if value < minimum or value > maximum:
        raise InvalidArgumentError(
            f"{argument} out of range ({minimum}..{maximum}): {value}",
            argument=argument,
        )
    return value


def validate_non_negative(value: Any, argument: str) -> int:
    """Validate that an integer amount is zero or positive."""
    validate_int(value, argument)
    if value < 0:
        raise InvalidArgumentError(f"{argument} cannot be negative: {value}", argument=argument)
    return value
