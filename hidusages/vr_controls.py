"""VR Controls page (0x03).

Virtual reality controls rely on designators to identify the individual
controls; most usages apply to the collections that make up a device.
"""

from __future__ import annotations

from enum import IntEnum

from .usage import ReservedUsage, decode

PAGE = 0x03

_RANGES = (
    ("Reserved0B_1F", 0x0B, 0x1F),
    ("Reserved22_FFFF", 0x22, 0xFFFF),
)


class VrControlsUsage(IntEnum):
    """Usages of the VR Controls page."""

    Undefined = 0x00
    Belt = 0x01
    BodySuit = 0x02
    Flexor = 0x03
    Glove = 0x04
    HeadTracker = 0x05
    HeadMountedDisplay = 0x06
    HandTracker = 0x07
    Oculometer = 0x08
    Vest = 0x09
    AnimatronicDevice = 0x0A
    StereoEnable = 0x20
    DisplayEnable = 0x21

    @classmethod
    def from_value(cls, value) -> VrControlsUsage | ReservedUsage:
        """Decode a usage id; ids that do not fit in 16 bits decode as Undefined."""
        return decode(value, cls, _RANGES, 0)