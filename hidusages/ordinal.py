"""Ordinal page (0x0A).

Declares multiple instances of a control, or of a set of controls, without
enumerating each one in the native usage page.
"""

from __future__ import annotations

from enum import IntEnum

from .usage import ReservedUsage, decode

PAGE = 0x0A

_RANGES = (("Instance5_65535", 5, 0xFFFF),)


class OrdinalUsage(IntEnum):
    """Usages of the Ordinal page."""

    Reserved = 0
    Instance1 = 1
    Instance2 = 2
    Instance3 = 3
    Instance4 = 4

    @classmethod
    def from_value(cls, value) -> OrdinalUsage | ReservedUsage:
        """Decode a usage id; ids that do not fit in 16 bits decode as 0."""
        return decode(value, cls, _RANGES, 0)