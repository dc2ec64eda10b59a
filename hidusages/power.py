"""Power page (0x84)."""

from __future__ import annotations

from enum import IntEnum

from .usage import ReservedUsage, decode

PAGE = 0x84

_RANGES = (
    ("Reserved06_0F", 0x06, 0x0F),
    ("Reserved26_2F", 0x26, 0x2F),
    ("Reserved39_3F", 0x39, 0x3F),
    ("Reserved48_4F", 0x48, 0x4F),
    ("Reserved5B_5F", 0x5B, 0x5F),
    ("Reserved74_FC", 0x74, 0xFC),
    ("Reserved100_FFFF", 0x100, 0xFFFF),
)


class PowerUsage(IntEnum):
    """Usages of the Power page."""

    Undefined = 0x00
    iName = 0x01
    PresentStatus = 0x02
    ChangedStatus = 0x03
    UPS = 0x04
    PowerSupply = 0x05
    BatterySystem = 0x10
    BatterySystemId = 0x11
    Battery = 0x12
    BatteryId = 0x13
    Charger = 0x14
    ChargerId = 0x15
    PowerConverter = 0x16
    PowerConverterId = 0x17
    OutletSystem = 0x18
    OutletSystemId = 0x19
    Input = 0x1A
    InputId = 0x1B
    Output = 0x1C
    OutputId = 0x1D
    Flow = 0x1E
    FlowId = 0x1F
    Outlet = 0x20
    OutletId = 0x21
    Gang = 0x22
    GangId = 0x23
    PowerSummary = 0x24
    PowerSummaryId = 0x25
    Voltage = 0x30
    Current = 0x31
    Frequency = 0x32
    ApparentPower = 0x33
    ActivePower = 0x34
    PercentLoad = 0x35
    Temperature = 0x36
    Humidity = 0x37
    BadCount = 0x38
    ConfigVoltage = 0x40
    ConfigCurrent = 0x41
    ConfigFrequency = 0x42
    ConfigApparentPower = 0x43
    ConfigActivePower = 0x44
    ConfigPercentLoad = 0x45
    ConfigTemperature = 0x46
    ConfigHumidity = 0x47
    SwitchOnControl = 0x50
    SwitchOffControl = 0x51
    ToggleControl = 0x52
    LowVoltageTransfer = 0x53
    HighVoltageTransfer = 0x54
    DelayBeforeReboot = 0x55
    DelayBeforeStartup = 0x56
    DelayBeforeShutdown = 0x57
    Test = 0x58
    ModuleReset = 0x59
    AudibleAlarmControl = 0x5A
    Present = 0x60
    Good = 0x61
    InternalFailure = 0x62
    VoltagOutOfRange = 0x63
    FrequencyOutOfRange = 0x64
    Overload = 0x65
    OverCharged = 0x66
    OverTemperature = 0x67
    ShutdownRequested = 0x68
    ShutdownImminent = 0x69
    Reserved6A = 0x6A
    SwitchOn_Off = 0x6B
    Switchable = 0x6C
    Used = 0x6D
    Boost = 0x6E
    Buck = 0x6F
    Initialized = 0x70
    Tested = 0x71
    AwaitingPower = 0x72
    CommunicationLost = 0x73
    iManufacturer = 0xFD
    iProduct = 0xFE
    iSerialNumber = 0xFF

    @classmethod
    def from_value(cls, value) -> PowerUsage | ReservedUsage:
        """Decode a usage id; ids that do not fit in 16 bits decode as Undefined."""
        return decode(value, cls, _RANGES, 0)