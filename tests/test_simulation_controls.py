import pytest

from hidusages.simulation_controls import SimulationControlsUsage
from hidusages.usage import ReservedUsage


@pytest.mark.parametrize("usage", list(SimulationControlsUsage))
def test_members_round_trip(usage):
    assert SimulationControlsUsage.from_value(int(usage)) is usage


def test_named_usages():
    assert SimulationControlsUsage.from_value(12) is SimulationControlsUsage.BicycleSimulationDevice
    assert SimulationControlsUsage.from_value(176) is SimulationControlsUsage.Aileron
    assert SimulationControlsUsage.from_value(208) is SimulationControlsUsage.RearBrake


def test_reserved_ranges():
    assert SimulationControlsUsage.from_value(13) == ReservedUsage("Reserved0D_1F", 13)
    assert SimulationControlsUsage.from_value(38) == ReservedUsage("Reserved26_AF", 38)
    assert SimulationControlsUsage.from_value(209) == ReservedUsage("ReservedD1_FFFF", 209)


@pytest.mark.parametrize("value", [-1, 65536])
def test_out_of_range_is_undefined(value):
    assert SimulationControlsUsage.from_value(value) is SimulationControlsUsage.Undefined


def test_every_id_decodes_to_itself():
    assert all(int(SimulationControlsUsage.from_value(i)) == i for i in range(0x10000))