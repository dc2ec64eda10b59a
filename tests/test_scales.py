import pytest

from hidusages.scales import ScalesUsage
from hidusages.usage import ReservedUsage


@pytest.mark.parametrize("usage", list(ScalesUsage))
def test_members_round_trip(usage):
    assert ScalesUsage.from_value(int(usage)) is usage


def test_named_usages():
    assert ScalesUsage.from_value(32) is ScalesUsage.ScaleDevice
    assert ScalesUsage.from_value(92) is ScalesUsage.WeightUnitPound
    assert ScalesUsage.from_value(129) is ScalesUsage.EnforcedZeroReturn


@pytest.mark.parametrize(
    ("value", "name"),
    [
        (2, "Reserved02_1F"),
        (43, "Reserved2B_2F"),
        (54, "Reserved36_3F"),
        (66, "Reserved42_4F"),
        (93, "Reserved5D_5F"),
        (98, "Reserved62_6F"),
        (121, "Reserved79_7F"),
        (130, "Reserved82_FFFF"),
    ],
)
def test_reserved_range_starts(value, name):
    assert ScalesUsage.from_value(value) == ReservedUsage(name, value)


@pytest.mark.parametrize("value", [-1, 65536])
def test_out_of_range_is_undefined(value):
    assert ScalesUsage.from_value(value) is ScalesUsage.Undefined


def test_every_id_decodes_to_itself():
    assert all(int(ScalesUsage.from_value(i)) == i for i in range(0x10000))