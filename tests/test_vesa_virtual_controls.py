import pytest

from hidusages.usage import ReservedUsage
from hidusages.vesa_virtual_controls import VesaVirtualControlsUsage


@pytest.mark.parametrize("member", list(VesaVirtualControlsUsage))
def test_every_member_round_trips(member):
    assert VesaVirtualControlsUsage.from_value(int(member)) is member


def test_every_id_decodes_to_itself():
    for number in range(0x10000):
        assert int(VesaVirtualControlsUsage.from_value(number)) == number


@pytest.mark.parametrize(
    "number, name",
    [
        (0x02, "Reserved02_0F"),
        (0x0F, "Reserved02_0F"),
        (0x13, "Reserved13_15"),
        (0x15, "Reserved13_15"),
        (0x1D, "Reserved1D_1F"),
        (0x2D, "Reserved2D_2F"),
        (0x3D, "Reserved3D_3F"),
        (0x4D, "Reserved4D_55"),
        (0x55, "Reserved4D_55"),
        (0x59, "Reserved59_5D"),
        (0x61, "Reserved61_6F"),
        (0x71, "Reserved71_A1"),
        (0xA1, "Reserved71_A1"),
        (0xB1, "ReservedB1_C9"),
        (0xCB, "ReservedCB_D3"),
        (0xD5, "ReservedD5_FFFF"),
        (0xFFFF, "ReservedD5_FFFF"),
    ],
)
def test_reserved_ranges(number, name):
    assert VesaVirtualControlsUsage.from_value(number) == ReservedUsage(name, number)


def test_black_levels_sit_inside_named_reserved_span():
    assert VesaVirtualControlsUsage.from_value(0x6C) is VesaVirtualControlsUsage.RedVideoBlackLevel
    assert VesaVirtualControlsUsage.from_value(0x6F) is VesaVirtualControlsUsage.Reserved6F
    assert VesaVirtualControlsUsage.from_value(0x70) is VesaVirtualControlsUsage.BlueVideoBlackLevel


def test_named_usages():
    assert VesaVirtualControlsUsage.from_value(0x10) is VesaVirtualControlsUsage.Brightness
    assert VesaVirtualControlsUsage.from_value(0x56) is VesaVirtualControlsUsage.HorizontalMoiré
    assert VesaVirtualControlsUsage.from_value(0xD4) is VesaVirtualControlsUsage.StereoMode


@pytest.mark.parametrize("number", [-1, 0x10000])
def test_out_of_range_decodes_as_undefined(number):
    assert VesaVirtualControlsUsage.from_value(number) is VesaVirtualControlsUsage.Undefined


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        VesaVirtualControlsUsage.from_value(None)