"""Shared machinery for decoding 16-bit HID usage ids into named usages."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Tuple, Type, TypeVar, Union

U16_MAX = 0xFFFF

E = TypeVar("E", bound=IntEnum)

UsageRange = Tuple[str, int, int]


@dataclass(frozen=True, order=True)
class ReservedUsage:
    """A usage id that falls in a named range of ids sharing one definition."""

    name: str
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= U16_MAX:
            raise ValueError(f"usage id {self.value} does not fit in 16 bits")

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.name


def coerce_u16(value, default: int) -> int:
    """Return ``value`` as an int in 0..0xFFFF, or ``default`` when it does not fit.

    Raises TypeError when ``value`` is not an integer at all.
    """
    number = operator.index(value)
    if 0 <= number <= U16_MAX:
        return number
    return default


def decode(
    value,
    usage_enum: Type[E],
    reserved_ranges: Iterable[UsageRange],
    default: int = 0,
) -> Union[E, ReservedUsage]:
    """Decode a usage id into a member of ``usage_enum`` or a ranged usage.

    ``reserved_ranges`` holds ``(name, first, last)`` triples with inclusive
    bounds. Values that do not fit in 16 bits decode as ``default``.
    """
    number = coerce_u16(value, default)
    try:
        return usage_enum(number)
    except ValueError:
        pass
    for name, first, last in reserved_ranges:
        if first <= number <= last:
            return ReservedUsage(name, number)
    raise ValueError(f"usage id {number:#06x} is not defined by {usage_enum.__name__}")