"""Typed attribute values written into features."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class StringValue:
    value: str


@dataclass(frozen=True)
class IntegerValue:
    value: int


@dataclass(frozen=True)
class RealValue:
    value: float


FieldValue = Union[StringValue, IntegerValue, RealValue]


def as_field_value(value) -> FieldValue | None:
    """
    Wrap a plain Python value in the matching FieldValue variant.

    FieldValue instances and None are returned unchanged.

    Raises:
        TypeError: For values with no matching variant (bool included)
    """
    if value is None or isinstance(value, (StringValue, IntegerValue, RealValue)):
        return value
    if isinstance(value, bool):
        raise TypeError("Boolean values are ambiguous, wrap them in IntegerValue")
    if isinstance(value, str):
        return StringValue(value)
    if isinstance(value, int):
        return IntegerValue(value)
    if isinstance(value, float):
        return RealValue(value)
    raise TypeError(f"No field value variant for {type(value).__name__}")
