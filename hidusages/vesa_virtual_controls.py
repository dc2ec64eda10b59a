"""VESA Virtual Controls page (0x82).

Controls for VESA-supported monitor characteristics such as brightness,
contrast, size and position. Each usage id equals the VCP op-code of the
same value.
"""

from __future__ import annotations

from enum import IntEnum

from .usage import ReservedUsage, decode

PAGE = 0x82

_RANGES = (
    ("Reserved02_0F", 0x02, 0x0F),
    ("Reserved13_15", 0x13, 0x15),
    ("Reserved1D_1F", 0x1D, 0x1F),
    ("Reserved2D_2F", 0x2D, 0x2F),
    ("Reserved3D_3F", 0x3D, 0x3F),
    ("Reserved4D_55", 0x4D, 0x55),
    ("Reserved59_5D", 0x59, 0x5D),
    ("Reserved61_6F", 0x61, 0x6B),
    ("Reserved71_A1", 0x71, 0xA1),
    ("ReservedB1_C9", 0xB1, 0xC9),
    ("ReservedCB_D3", 0xCB, 0xD3),
    ("ReservedD5_FFFF", 0xD5, 0xFFFF),
)


class VesaVirtualControlsUsage(IntEnum):
    """Usages of the VESA Virtual Controls page."""

    Undefined = 0x00
    Degauss = 0x01
    Brightness = 0x10
    Reserved11 = 0x11
    Contrast = 0x12
    RedVideoGain = 0x16
    Reserved17 = 0x17
    GreenVideoGain = 0x18
    Reserved19 = 0x19
    BlueVideoGain = 0x1A
    Reserved1B = 0x1B
    Focus = 0x1C
    HorizontalPosition = 0x20
    Reserved21 = 0x21
    HorizontalSize = 0x22
    Reserved23 = 0x23
    HorizontalPincushion = 0x24
    Reserved25 = 0x25
    HorizontalPincushionBalance = 0x26
    Reserved27 = 0x27
    HorizontalMisconvergence = 0x28
    Reserved29 = 0x29
    HorizontalLinearity = 0x2A
    Reserved2B = 0x2B
    HorizontalLinearityBalance = 0x2C
    VerticalPosition = 0x30
    Reserved31 = 0x31
    VerticalSize = 0x32
    Reserved33 = 0x33
    VerticalPincushion = 0x34
    Reserved35 = 0x35
    VerticalPincushionBalance = 0x36
    Reserved37 = 0x37
    VerticalMisconvergence = 0x38
    Reserved39 = 0x39
    VerticalLinearity = 0x3A
    Reserved3B = 0x3B
    VerticalLinearityBalance = 0x3C
    ParallelogramDistortion_KeyBalance = 0x40
    Reserved41 = 0x41
    TrapezoidalDistortion_Key = 0x42
    Reserved43 = 0x43
    Tilt_Rotation = 0x44
    Reserved45 = 0x45
    TopCornerDistortionControl = 0x46
    Reserved47 = 0x47
    TopCornerDistortionBalance = 0x48
    Reserved49 = 0x49
    BottomCornerDistortionControl = 0x4A
    Reserved4B = 0x4B
    BottomCornerDistortionBalance = 0x4C
    HorizontalMoiré = 0x56
    Reserved57 = 0x57
    VerticalMoiré = 0x58
    InputLevelSelect = 0x5E
    Reserved5F = 0x5F
    InputSourceSelect = 0x60
    RedVideoBlackLevel = 0x6C
    Reserved6D = 0x6D
    GreenVideoBlackLevel = 0x6E
    Reserved6F = 0x6F
    BlueVideoBlackLevel = 0x70
    AutoSizeCenter = 0xA2
    ReservedA3 = 0xA3
    PolarityHorizontalSynchronization = 0xA4
    ReservedA5 = 0xA5
    PolarityVerticalSynchronization = 0xA6
    ReservedA7 = 0xA7
    SynchronizationType = 0xA8
    ReservedA9 = 0xA9
    ScreenOrientation = 0xAA
    ReservedAB = 0xAB
    HorizontalFrequency = 0xAC
    ReservedAD = 0xAD
    VerticalFrequency = 0xAE
    ReservedAF = 0xAF
    Settings = 0xB0
    OnScreenDisplay = 0xCA
    StereoMode = 0xD4

    @classmethod
    def from_value(cls, value) -> VesaVirtualControlsUsage | ReservedUsage:
        """Decode a usage id; ids that do not fit in 16 bits decode as Undefined."""
        return decode(value, cls, _RANGES, 0)