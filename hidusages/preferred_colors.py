"""Indices of the 8-bit preferred colors and the RGB value of each."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import IntEnum

U8_MAX = 0xFF


@dataclass(frozen=True, order=True)
class RGB:
    """An 8-bit-per-channel colour."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= operator.index(channel) <= U8_MAX:
                raise ValueError(f"colour channel {channel} does not fit in 8 bits")


def _coerce_u8(value, default: int) -> int:
    number = operator.index(value)
    if 0 <= number <= U8_MAX:
        return number
    return default


class PreferredColors8bit(IntEnum):
    """Preferred colour indices; 141 to 254 are reserved."""

    AliceBlue = 0
    AntiqueWhite = 1
    Aqua = 2
    Aquamarine = 3
    Azure = 4
    Beige = 5
    Bisque = 6
    Black = 7
    BlanchedAlmond = 8
    Blue = 9
    BlueViolet = 10
    Brown = 11
    BurlyWood = 12
    CadetBlue = 13
    Chartreuse = 14
    Chocolate = 15
    Coral = 16
    CornflowerBlue = 17
    Cornsilk = 18
    Crimson = 19
    Cyan = 20
    DarkBlue = 21
    DarkCyan = 22
    DarkGoldenRod = 23
    DarkGray = 24
    DarkGreen = 25
    DarkKhaki = 26
    DarkMagenta = 27
    DarkOliveGreen = 28
    DarkOrange = 29
    DarkOrchid = 30
    DarkRed = 31
    DarkSalmon = 32
    DarkSeaGreen = 33
    DarkSlateBlue = 34
    DarkSlateGray = 35
    DarkTurquoise = 36
    DarkViolet = 37
    DeepPink = 38
    DeepSkyBlue = 39
    DimGray = 40
    DodgerBlue = 41
    FireBrick = 42
    FloralWhite = 43
    ForestGreen = 44
    Fuchsia = 45
    Gainsboro = 46
    GhostWhite = 47
    Gold = 48
    GoldenRod = 49
    Gray = 50
    Green = 51
    GreenYellow = 52
    HoneyDew = 53
    HotPink = 54
    IndianRed = 55
    Indigo = 56
    Ivory = 57
    Khaki = 58
    Lavender = 59
    LavenderBlush = 60
    LawnGreen = 61
    LemonChiffon = 62
    LightBlue = 63
    LightCoral = 64
    LightCyan = 65
    LightGoldenRodYellow = 66
    LightGray = 67
    LightGreen = 68
    LightPink = 69
    LightSalmon = 70
    LightSeaGreen = 71
    LightSkyBlue = 72
    LightSlateGray = 73
    LightSteelBlue = 74
    LightYellow = 75
    Lime = 76
    LimeGreen = 77
    Linen = 78
    Magenta = 79
    Maroon = 80
    MediumAquaMarine = 81
    MediumBlue = 82
    MediumOrchid = 83
    MediumPurple = 84
    MediumSeaGreen = 85
    MediumSlateBlue = 86
    MediumSpringGreen = 87
    MediumTurquoise = 88
    MediumVioletRed = 89
    MidnightBlue = 90
    MintCream = 91
    MistyRose = 92
    Moccasin = 93
    NavajoWhite = 94
    Navy = 95
    OldLace = 96
    Olive = 97
    OliveDrab = 98
    Orange = 99
    OrangeRed = 100
    Orchid = 101
    PaleGoldenRod = 102
    PaleGreen = 103
    PaleTurquoise = 104
    PaleVioletRed = 105
    PapayaWhip = 106
    PeachPuff = 107
    Peru = 108
    Pink = 109
    Plum = 110
    PowderBlue = 111
    Purple = 112
    RebeccaPurple = 113
    Red = 114
    RosyBrown = 115
    RoyalBlue = 116
    SaddleBrown = 117
    Salmon = 118
    SandyBrown = 119
    SeaGreen = 120
    SeaShell = 121
    Sienna = 122
    Silver = 123
    SkyBlue = 124
    SlateBlue = 125
    SlateGray = 126
    Snow = 127
    SpringGreen = 128
    SteelBlue = 129
    Tan = 130
    Teal = 131
    Thistle = 132
    Tomato = 133
    Turquoise = 134
    Violet = 135
    Wheat = 136
    White = 137
    WhiteSmoke = 138
    Yellow = 139
    YellowGreen = 140
    Reserved141_254 = 141
    NoPreferredColor = 255

    @classmethod
    def from_value(cls, value) -> PreferredColors8bit:
        """Decode a colour index; indices that do not fit in 8 bits decode as 255."""
        number = _coerce_u8(value, U8_MAX)
        if cls.Reserved141_254 <= number < cls.NoPreferredColor:
            return cls.Reserved141_254
        return cls(number)

    def rgb(self) -> RGB | None:
        """The colour's RGB value, or None for reserved and no-preference indices."""
        return _PALETTE.get(self)


_PALETTE: dict[PreferredColors8bit, RGB] = {
    color: RGB(*channels)
    for color, channels in zip(
        PreferredColors8bit,
        (
            (0xF0, 0xF8, 0xFF), (0xFA, 0xEB, 0xD7), (0x00, 0xFF, 0xFF), (0x7F, 0xFF, 0xD4),
            (0xF0, 0xFF, 0xFF), (0xF5, 0xF5, 0xDC), (0xFF, 0xE4, 0xC4), (0x00, 0x00, 0x00),
            (0xFF, 0xEB, 0xCD), (0x00, 0x00, 0xFF), (0x8A, 0x2B, 0xE2), (0xA5, 0x2A, 0x2A),
            (0xDE, 0xB8, 0x87), (0x5F, 0x9E, 0xA0), (0x7F, 0xFF, 0x00), (0xD2, 0x69, 0x1E),
            (0xFF, 0x7F, 0x50), (0x64, 0x95, 0xED), (0xFF, 0xF8, 0xDC), (0xDC, 0x14, 0x3C),
            (0x00, 0xFF, 0xFF), (0x00, 0x00, 0x8B), (0x00, 0x8B, 0x8B), (0xB8, 0x86, 0x0B),
            (0xA9, 0xA9, 0xA9), (0x00, 0x64, 0x00), (0xBD, 0xB7, 0x6B), (0x8B, 0x00, 0x8B),
            (0x55, 0x6B, 0x2F), (0xFF, 0x8C, 0x00), (0x99, 0x32, 0xCC), (0x8B, 0x00, 0x00),
            (0xE9, 0x96, 0x7A), (0x8F, 0xBC, 0x8F), (0x48, 0x3D, 0x8B), (0x2F, 0x4F, 0x4F),
            (0x00, 0xCE, 0xD1), (0x94, 0x00, 0xD3), (0xFF, 0x14, 0x93), (0x00, 0xBF, 0xFF),
            (0x69, 0x69, 0x69), (0x1E, 0x90, 0xFF), (0xB2, 0x22, 0x22), (0xFF, 0xFA, 0xF0),
            (0x22, 0x8B, 0x22), (0xFF, 0x00, 0xFF), (0xDC, 0xDC, 0xDC), (0xF8, 0xF8, 0xFF),
            (0xFF, 0xD7, 0x00), (0xDA, 0xA5, 0x20), (0x80, 0x80, 0x80), (0x00, 0x80, 0x00),
            (0xAD, 0xFF, 0x2F), (0xF0, 0xFF, 0xF0), (0xFF, 0x69, 0xB4), (0xCD, 0x5C, 0x5C),
            (0x4B, 0x00, 0x82), (0xFF, 0xFF, 0xF0), (0xF0, 0xE6, 0x8C), (0xE6, 0xE6, 0xFA),
            (0xFF, 0xF0, 0xF5), (0x7C, 0xFC, 0x00), (0xFF, 0xFA, 0xCD), (0xAD, 0xD8, 0xE6),
            (0xF0, 0x80, 0x80), (0xE0, 0xFF, 0xFF), (0xFA, 0xFA, 0xD2), (0xD3, 0xD3, 0xD3),
            (0x90, 0xEE, 0x90), (0xFF, 0xB6, 0xC1), (0xFF, 0xA0, 0x7A), (0x20, 0xB2, 0xAA),
            (0x87, 0xCE, 0xFA), (0x77, 0x88, 0x99), (0xB0, 0xC4, 0xDE), (0xFF, 0xFF, 0xE0),
            (0x00, 0xFF, 0x00), (0x32, 0xCD, 0x32), (0xFA, 0xF0, 0xE6), (0xFF, 0x00, 0xFF),
            (0x80, 0x00, 0x00), (0x66, 0xCD, 0xAA), (0x00, 0x00, 0xCD), (0xBA, 0x55, 0xD3),
            (0x93, 0x70, 0xDB), (0x3C, 0xB3, 0x71), (0x7B, 0x68, 0xEE), (0x00, 0xFA, 0x9A),
            (0x48, 0xD1, 0xCC), (0xC7, 0x15, 0x85), (0x19, 0x19, 0x70), (0xF5, 0xFF, 0xFA),
            (0xFF, 0xE4, 0xE1), (0xFF, 0xE4, 0xB5), (0xFF, 0xDE, 0xAD), (0x00, 0x00, 0x80),
            (0xFD, 0xF5, 0xE6), (0x80, 0x80, 0x00), (0x6B, 0x8E, 0x23), (0xFF, 0xA5, 0x00),
            (0xFF, 0x45, 0x00), (0xDA, 0x70, 0xD6), (0xEE, 0xE8, 0xAA), (0x98, 0xFB, 0x98),
            (0xAF, 0xEE, 0xEE), (0xDB, 0x70, 0x93), (0xFF, 0xEF, 0xD5), (0xFF, 0xDA, 0xB9),
            (0xCD, 0x85, 0x3F), (0xFF, 0xC0, 0xCB), (0xDD, 0xA0, 0xDD), (0xB0, 0xE0, 0xE6),
            (0x80, 0x00, 0x80), (0x66, 0x33, 0x99), (0xFF, 0x00, 0x00), (0xBC, 0x8F, 0x8F),
            (0x41, 0x69, 0xE1), (0x8B, 0x45, 0x13), (0xFA, 0x80, 0x72), (0xF4, 0xA4, 0x60),
            (0x2E, 0x8B, 0x57), (0xFF, 0xF5, 0xEE), (0xA0, 0x52, 0x2D), (0xC0, 0xC0, 0xC0),
            (0x87, 0xCE, 0xEB), (0x6A, 0x5A, 0xCD), (0x70, 0x80, 0x90), (0xFF, 0xFA, 0xFA),
            (0x00, 0xFF, 0x7F), (0x46, 0x82, 0xB4), (0xD2, 0xB4, 0x8C), (0x00, 0x80, 0x80),
            (0xD8, 0xBF, 0xD8), (0xFF, 0x63, 0x47), (0x40, 0xE0, 0xD0), (0xEE, 0x82, 0xEE),
            (0xF5, 0xDE, 0xB3), (0xFF, 0xFF, 0xFF), (0xF5, 0xF5, 0xF5), (0xFF, 0xFF, 0x00),
            (0x9A, 0xCD, 0x32),
        ),
    )
}