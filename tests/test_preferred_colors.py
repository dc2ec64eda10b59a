import pytest

from hidusages.preferred_colors import RGB, PreferredColors8bit

COLORS = [
    c
    for c in PreferredColors8bit
    if c not in (PreferredColors8bit.Reserved141_254, PreferredColors8bit.NoPreferredColor)
]


def test_alice_blue_is_first():
    color = PreferredColors8bit.from_value(0)
    assert color is PreferredColors8bit.AliceBlue
    assert color.rgb() == RGB(0xF0, 0xF8, 0xFF)


def test_yellow_green_is_last_color():
    color = PreferredColors8bit.from_value(140)
    assert color is PreferredColors8bit.YellowGreen
    assert color.rgb() == RGB(0x9A, 0xCD, 0x32)


def test_rebecca_purple():
    assert PreferredColors8bit.from_value(113).rgb() == RGB(0x66, 0x33, 0x99)


def test_aqua_and_cyan_share_rgb_but_differ():
    aqua = PreferredColors8bit.from_value(2)
    cyan = PreferredColors8bit.from_value(20)
    assert aqua is not cyan
    assert aqua.rgb() == cyan.rgb()


@pytest.mark.parametrize("color", COLORS)
def test_round_trip_colors(color):
    decoded = PreferredColors8bit.from_value(int(color))
    assert decoded is color
    assert isinstance(decoded.rgb(), RGB)


def test_there_are_141_colors():
    decoded = [PreferredColors8bit.from_value(i) for i in range(141)]
    assert len(decoded) == 141
    assert decoded == COLORS
    assert all(color.rgb() is not None for color in decoded)


@pytest.mark.parametrize("value", [141, 200, 254])
def test_reserved_range(value):
    color = PreferredColors8bit.from_value(value)
    assert color is PreferredColors8bit.Reserved141_254
    assert color.rgb() is None


def test_no_preferred_color():
    color = PreferredColors8bit.from_value(255)
    assert color is PreferredColors8bit.NoPreferredColor
    assert color.rgb() is None


@pytest.mark.parametrize("value", [-1, 256, 65535])
def test_out_of_range_decodes_as_no_preference(value):
    assert PreferredColors8bit.from_value(value) is PreferredColors8bit.NoPreferredColor


def test_non_integer_raises():
    with pytest.raises(TypeError):
        PreferredColors8bit.from_value("red")


def test_rgb_rejects_channel_out_of_range():
    with pytest.raises(ValueError):
        RGB(256, 0, 0)
    with pytest.raises(ValueError):
        RGB(0, -1, 0)


def test_rgb_default_and_order():
    assert RGB() == PreferredColors8bit.Black.rgb()
    assert PreferredColors8bit.Black.rgb() < PreferredColors8bit.White.rgb()