from __future__ import annotations

from enum import Enum
from typing import Optional, Type, TypeVar

from ..core.enums import DayType
from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def require_range(value, field_name: str, low, high):
    if value is None or isinstance(value, bool) or not low <= value <= high:
        raise ValidationError(f"{field_name} must be between {low} and {high}")
    return value


def require_non_negative(value, field_name: str):
    if value is None or value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value


def optional_money(value, field_name: str) -> Optional[int]:
    """Money fields are integers in the smallest currency unit."""
    if value is None or value == "":
        return None
    try:
        amount = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name} must be an integer amount") from exc
    return require_non_negative(amount, field_name)


def coerce_enum(enum_cls: Type[E], value, field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as exc:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from exc


def require_no_hours(hours, day_type: DayType) -> None:
    """Letter-code days (sick, vacation, ...) carry no hours."""
    if hours is not None and day_type != DayType.WORK:
        raise ValidationError(f"{DayType(day_type).value} day must not have hours")
