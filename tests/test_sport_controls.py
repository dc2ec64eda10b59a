import pytest

from hidusages.sport_controls import SportControlsUsage
from hidusages.usage import ReservedUsage


@pytest.mark.parametrize("usage", list(SportControlsUsage))
def test_members_round_trip(usage):
    assert SportControlsUsage.from_value(int(usage)) is usage


def test_named_usages():
    assert SportControlsUsage.from_value(48) is SportControlsUsage.Oar
    assert SportControlsUsage.from_value(81) is SportControlsUsage.Iron1
    assert SportControlsUsage.from_value(99) is SportControlsUsage.Wood9


def test_reserved_ranges():
    assert SportControlsUsage.from_value(5) == ReservedUsage("Reserved05_2F", 5)
    assert SportControlsUsage.from_value(58) == ReservedUsage("Reserved3A_4F", 58)
    assert SportControlsUsage.from_value(100) == ReservedUsage("Reserved64_FFFF", 100)


@pytest.mark.parametrize("value", [-1, 65536])
def test_out_of_range_is_undefined(value):
    assert SportControlsUsage.from_value(value) is SportControlsUsage.Undefined


def test_every_id_decodes_to_itself():
    assert all(int(SportControlsUsage.from_value(i)) == i for i in range(0x10000))