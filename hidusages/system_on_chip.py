"""SoC page (0x11): management and control interfaces of a system-on-chip."""

from __future__ import annotations

from enum import IntEnum

from .usage import ReservedUsage, decode

PAGE = 0x11

_RANGES = (("Reserved0B_FFFF", 0x0B, 0xFFFF),)


class SoCUsage(IntEnum):
    """Usages of the SoC page."""

    Undefined = 0x00
    SocControl = 0x01
    FirmwareTransfer = 0x02
    FirmwareFileId = 0x03
    FileOffsetInBytes = 0x04
    FileTransferSizeMaxInBytes = 0x05
    FilePayload = 0x06
    FilePayloadSizeInBytes = 0x07
    FilePayloadContainsLastBytes = 0x08
    FileTransferStop = 0x09
    FileTransferTillEnd = 0x0A

    @classmethod
    def from_value(cls, value) -> SoCUsage | ReservedUsage:
        """Decode a usage id; ids that do not fit in 16 bits decode as Undefined."""
        return decode(value, cls, _RANGES, 0)