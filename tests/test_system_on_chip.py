import pytest

from hidusages.system_on_chip import SoCUsage
from hidusages.usage import ReservedUsage


@pytest.mark.parametrize("usage", list(SoCUsage))
def test_members_round_trip(usage):
    assert SoCUsage.from_value(int(usage)) is usage


def test_named_usages():
    assert SoCUsage.from_value(1) is SoCUsage.SocControl
    assert SoCUsage.from_value(10) is SoCUsage.FileTransferTillEnd


def test_reserved_tail():
    assert SoCUsage.from_value(11) == ReservedUsage("Reserved0B_FFFF", 11)
    assert SoCUsage.from_value(65535) == ReservedUsage("Reserved0B_FFFF", 65535)


@pytest.mark.parametrize("value", [-1, 70000])
def test_out_of_range_is_undefined(value):
    assert SoCUsage.from_value(value) is SoCUsage.Undefined


def test_every_id_decodes_to_itself():
    assert all(int(SoCUsage.from_value(i)) == i for i in range(0x10000))