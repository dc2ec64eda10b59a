"""Monitor Enumerated page (0x81).

Each VESA virtual control defines its own mapping between an Enum N usage and
the meaning of the value it returns, so the ids here are only numbered slots.
"""

from __future__ import annotations

from enum import IntEnum

from .usage import ReservedUsage, decode

PAGE = 0x81

_RANGES = (("Enum5_65535", 5, 0xFFFF),)


class MonitorEnumeratedUsage(IntEnum):
    """Usages of the Monitor Enumerated page."""

    Reserved = 0
    Enum1 = 1
    Enum2 = 2
    Enum3 = 3
    Enum4 = 4

    @classmethod
    def from_value(cls, value) -> MonitorEnumeratedUsage | ReservedUsage:
        """Decode a usage id; ids that do not fit in 16 bits decode as 0."""
        return decode(value, cls, _RANGES, 0)