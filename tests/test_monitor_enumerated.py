import pytest

from hidusages.monitor_enumerated import MonitorEnumeratedUsage
from hidusages.usage import ReservedUsage


@pytest.mark.parametrize("usage", list(MonitorEnumeratedUsage))
def test_members_round_trip(usage):
    assert MonitorEnumeratedUsage.from_value(int(usage)) is usage


def test_named_enums():
    assert MonitorEnumeratedUsage.from_value(1) is MonitorEnumeratedUsage.Enum1
    assert MonitorEnumeratedUsage.from_value(4) is MonitorEnumeratedUsage.Enum4


def test_ranged_enums():
    assert MonitorEnumeratedUsage.from_value(5) == ReservedUsage("Enum5_65535", 5)
    assert MonitorEnumeratedUsage.from_value(65535) == ReservedUsage("Enum5_65535", 65535)


@pytest.mark.parametrize("value", [-7, 1 << 20])
def test_out_of_range_is_default(value):
    assert MonitorEnumeratedUsage.from_value(value) is MonitorEnumeratedUsage.Reserved


def test_every_id_decodes_to_itself():
    assert all(int(MonitorEnumeratedUsage.from_value(i)) == i for i in range(0x10000))