import pytest

from hidusages.ordinal import OrdinalUsage
from hidusages.usage import ReservedUsage


@pytest.mark.parametrize("usage", list(OrdinalUsage))
def test_members_round_trip(usage):
    assert OrdinalUsage.from_value(int(usage)) is usage


def test_named_instances():
    assert OrdinalUsage.from_value(0) is OrdinalUsage.Reserved
    assert OrdinalUsage.from_value(4) is OrdinalUsage.Instance4


def test_higher_instances_keep_their_number():
    assert OrdinalUsage.from_value(5) == ReservedUsage("Instance5_65535", 5)
    assert OrdinalUsage.from_value(65535) == ReservedUsage("Instance5_65535", 65535)


@pytest.mark.parametrize("value", [-1, 65536])
def test_out_of_range_is_default(value):
    assert OrdinalUsage.from_value(value) is OrdinalUsage.Reserved


def test_every_id_decodes_to_itself():
    assert all(int(OrdinalUsage.from_value(i)) == i for i in range(0x10000))


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        OrdinalUsage.from_value("1")