import pytest

from hidusages.telephony_device import TelephonyDeviceUsage
from hidusages.usage import ReservedUsage


@pytest.mark.parametrize("member", list(TelephonyDeviceUsage))
def test_every_member_round_trips(member):
    assert TelephonyDeviceUsage.from_value(int(member)) is member


def test_every_id_decodes_to_itself():
    for number in range(0x10000):
        assert int(TelephonyDeviceUsage.from_value(number)) == number


@pytest.mark.parametrize(
    "number, name",
    [
        (0x08, "Reserved08_1F"),
        (0x1F, "Reserved08_1F"),
        (0x32, "Reserved32_4F"),
        (0x54, "Reserved54_6F"),
        (0x75, "Reserved75_8F"),
        (0x9F, "Reserved9F_AF"),
        (0xC3, "ReservedC3_EF"),
        (0xF6, "ReservedF6_F7"),
        (0xF7, "ReservedF6_F7"),
        (0xFF, "ReservedFF_107"),
        (0x107, "ReservedFF_107"),
        (0x10B, "Reserved10B_10F"),
        (0x115, "Reserved115_13F"),
        (0x148, "Reserved148_149"),
        (0x149, "Reserved148_149"),
        (0x14C, "Reserved14C_FFFF"),
        (0xFFFF, "Reserved14C_FFFF"),
    ],
)
def test_reserved_ranges(number, name):
    result = TelephonyDeviceUsage.from_value(number)
    assert result == ReservedUsage(name, number)
    assert str(result) == name


def test_named_usages():
    assert TelephonyDeviceUsage.from_value(32) is TelephonyDeviceUsage.HookSwitch
    assert TelephonyDeviceUsage.from_value(176) is TelephonyDeviceUsage.PhoneKey0
    assert TelephonyDeviceUsage.from_value(330) is TelephonyDeviceUsage.CallDuration


@pytest.mark.parametrize("number", [-5, 0x10000])
def test_out_of_range_decodes_as_undefined(number):
    assert TelephonyDeviceUsage.from_value(number) is TelephonyDeviceUsage.Undefined


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        TelephonyDeviceUsage.from_value(1.5)