# hidusages

Named usages for USB HID usage pages. Give it a raw usage ID and it returns
the usage that ID names. IDs in reserved ranges keep their raw number.

Pages covered:

| Page | Module | Class |
| --- | --- | --- |
| Simulation Controls (0x02) | `hidusages.simulation_controls` | `SimulationControlsUsage` |
| VR Controls (0x03) | `hidusages.vr_controls` | `VrControlsUsage` |
| Sport Controls (0x04) | `hidusages.sport_controls` | `SportControlsUsage` |
| Ordinal (0x0A) | `hidusages.ordinal` | `OrdinalUsage` |
| Telephony Device (0x0B) | `hidusages.telephony_device` | `TelephonyDeviceUsage` |
| Physical Input Device (0x0F) | `hidusages.physical_input_device` | `PhysicalInputDeviceUsage` |
| SoC (0x11) | `hidusages.system_on_chip` | `SoCUsage` |
| Monitor Enumerated (0x81) | `hidusages.monitor_enumerated` | `MonitorEnumeratedUsage` |
| VESA Virtual Controls (0x82) | `hidusages.vesa_virtual_controls` | `VesaVirtualControlsUsage` |
| Power (0x84) | `hidusages.power` | `PowerUsage` |
| Scales (0x8D) | `hidusages.scales` | `ScalesUsage` |
| 8-bit Preferred Colors | `hidusages.preferred_colors` | `PreferredColors8bit`, `RGB` |

Each of these page modules also has a `PAGE` constant that holds the page
number. The preferred colors module does not.

## Installing

```
pip install hidusages
```

## Usage

Every usage class is an `IntEnum` and has a `from_value` class method. It
takes a usage ID and returns the usage that ID names:

```python
from hidusages.power import PowerUsage
from hidusages.scales import ScalesUsage

PowerUsage.from_value(0x30)      # PowerUsage.Voltage
ScalesUsage.from_value(0x52)     # ScalesUsage.WeightUnitGram
```

An ID inside a reserved range decodes to a `hidusages.usage.ReservedUsage`.
This is a frozen dataclass with the range's `name` and the original `value`.
Its `str()` gives the name. `int()` gives the value, and the value can be used
anywhere an index is expected.

```python
from hidusages.vr_controls import VrControlsUsage

usage = VrControlsUsage.from_value(0x40)
usage.name    # "Reserved22_FFFF"
int(usage)    # 64
```

A value that is negative or does not fit in 16 bits decodes the same way as 0.
That gives the page's default usage, such as `Undefined` or `Reserved`. A value
that is not an integer at all raises `TypeError`.

`hidusages.usage` also provides the two helpers behind `from_value`:

- `coerce_u16(value, default)` returns `value` if it is in `0..0xFFFF`, and
  `default` otherwise.
- `decode(value, usage_enum, reserved_ranges, default)` looks the value up in
  an `IntEnum` first. If it is not there, it looks through `(name, first, last)`
  ranges with inclusive bounds. It raises `ValueError` if neither one covers
  the value.

### Preferred colors

An 8-bit preferred-color index decodes to a named color. The color's `rgb()`
method returns its RGB value:

```python
from hidusages.preferred_colors import PreferredColors8bit

color = PreferredColors8bit.from_value(9)   # PreferredColors8bit.Blue
color.rgb()                                 # RGB(r=0, g=0, b=255)
```

Indices 141 to 254 decode to `Reserved141_254`. Index 255 means
`NoPreferredColor`, and so does any value that does not fit in 8 bits. For
both of these, `rgb()` returns `None`. `RGB` is a frozen, ordered dataclass,
and it raises `ValueError` for any channel outside `0..255`.

### Sensors page tables

For the Sensors page (0x20), two tables list the usages by ID range. Each
entry is a `(name, first, last)` triple, given in ID order. A defined usage has
`first == last`. A reserved range covers every ID from `first` to `last`.

- `hidusages.sensors_collections.collection_entries()` covers the collection
  usages, IDs 0x0000 to 0x00FF.
- `hidusages.sensors_data_fields.data_field_entries()` covers the property and
  data field usages, IDs 0x0100 to 0x07FF.

## What the package does not do

The Sensors page has no usage class and no `from_value` decoder. The package
only provides the two tables above. It does not cover the Sensors selector
usages from 0x0800 up, the modifier ranges, or the vendor IDs. The package
also does not read HID reports or report descriptors. It does not talk to
devices either. It only turns usage IDs into names.

## Running the tests

```
pip install -e ".[test]"
pytest
```