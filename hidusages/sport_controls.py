"""Sport Controls page (0x04)."""

from __future__ import annotations

from enum import IntEnum

from .usage import ReservedUsage, decode

PAGE = 0x04

_RANGES = (
    ("Reserved05_2F", 0x05, 0x2F),
    ("Reserved3A_4F", 0x3A, 0x4F),
    ("Reserved64_FFFF", 0x64, 0xFFFF),
)


class SportControlsUsage(IntEnum):
    """Usages of the Sport Controls page."""

    Undefined = 0x00
    BaseballBat = 0x01
    GolfClub = 0x02
    RowingMachine = 0x03
    Treadmill = 0x04
    Oar = 0x30
    Slope = 0x31
    Rate = 0x32
    StickSpeed = 0x33
    StickFaceAngle = 0x34
    StickHeel_Toe = 0x35
    StickFollowThrough = 0x36
    StickTempo = 0x37
    StickType = 0x38
    StickHeight = 0x39
    Putter = 0x50
    Iron1 = 0x51
    Iron2 = 0x52
    Iron3 = 0x53
    Iron4 = 0x54
    Iron5 = 0x55
    Iron6 = 0x56
    Iron7 = 0x57
    Iron8 = 0x58
    Iron9 = 0x59
    Iron10 = 0x5A
    Iron11 = 0x5B
    SandWedge = 0x5C
    LoftWedge = 0x5D
    PowerWedge = 0x5E
    Wood1 = 0x5F
    Wood3 = 0x60
    Wood5 = 0x61
    Wood7 = 0x62
    Wood9 = 0x63

    @classmethod
    def from_value(cls, value) -> SportControlsUsage | ReservedUsage:
        """Decode a usage id; ids that do not fit in 16 bits decode as Undefined."""
        return decode(value, cls, _RANGES, 0)