import re

import pytest

from hidusages.sensors_collections import collection_entries
from hidusages.sensors_data_fields import FIRST_ID, LAST_ID, data_field_entries


def _by_name():
    return {name: (first, last) for name, first, last in data_field_entries()}


def test_entries_cover_the_whole_span_without_gaps():
    entries = data_field_entries()
    assert entries[0][1] == FIRST_ID
    assert entries[-1][2] == LAST_ID
    for (_, _, prev_last), (_, first, _) in zip(entries, entries[1:]):
        assert first == prev_last + 1


def test_every_entry_is_well_formed():
    for name, first, last in data_field_entries():
        assert first <= last, name


def test_names_are_unique():
    names = [name for name, _, _ in data_field_entries()]
    assert len(names) == len(set(names))


def test_span_follows_collections():
    assert collection_entries()[-1][2] + 1 == data_field_entries()[0][1]


def test_multi_id_entries_are_reserved():
    for name, first, last in data_field_entries():
        if first != last:
            assert name.startswith("Reserved"), name


_RESERVED = re.compile(r"^Reserved([0-9A-F]+)(?:_([0-9A-F]+))?$")


def test_reserved_names_match_their_ids():
    checked = 0
    for name, first, last in data_field_entries():
        match = _RESERVED.match(name)
        if match is None:
            continue
        low, high = match.groups()
        assert first == int(low, 16), name
        assert last == int(high or low, 16), name
        checked += 1
    assert checked > 0


@pytest.mark.parametrize(
    "name, usage_id",
    [
        ("Event", 0x200),
        ("Property", 0x300),
        ("DataFieldLocation", 0x400),
        ("PropertyLocation", 0x42A),
        ("DataFieldRelativeHumidity", 0x433),
        ("DataFieldTimestamp", 0x529),
        ("PropertyGeneric", 0x580),
        ("DataFieldCustomTypeID", 0x5B0),
        ("DataFieldGestureSensor", 0x5F0),
    ],
)
def test_defined_usage_ids(name, usage_id):
    assert _by_name()[name] == (usage_id, usage_id)


def test_single_reserved_ids():
    entries = _by_name()
    assert entries["Reserved401"] == (0x401, 0x401)
    assert entries["Reserved432"] == (0x432, 0x432)
    assert entries["Reserved4E1"] == (0x4E1, 0x4E1)


def test_last_reserved_range_reaches_end():
    assert data_field_entries()[-1] == ("Reserved5F6_7FF", 0x5F6, 0x7FF)


def test_custom_values_are_consecutive():
    entries = _by_name()
    base = entries["DataFieldCustomValue1"][0]
    for n in range(1, 29):
        assert entries[f"DataFieldCustomValue{n}"][0] == base + n - 1
    assert entries["DataFieldGeneric"][0] == entries["DataFieldCustomValue28"][0] + 1


def test_entries_are_stable_between_calls():
    first = data_field_entries()
    assert len(first) > 0
    assert data_field_entries() == first