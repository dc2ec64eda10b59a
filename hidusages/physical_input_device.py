"""Physical Input Device page (0x0F).

A physical input device produces force-feedback sensations from
parameterised, pre-downloaded, waveform-based effects. Devices may support
well-known waveforms (ramp, sine, spring and so on) and custom waveforms.
"""

from __future__ import annotations

from enum import IntEnum

from .usage import ReservedUsage, decode

PAGE = 0x0F

_RANGES = (
    ("Reserved02_1F", 0x02, 0x1F),
    ("Reserved29_2F", 0x29, 0x2F),
    ("Reserved35_3F", 0x35, 0x3F),
    ("Reserved44_4F", 0x44, 0x4F),
    ("Reserved9D_9E", 0x9D, 0x9E),
    ("ReservedA1_A3", 0xA1, 0xA3),
    ("ReservedAD_FFFF", 0xAD, 0xFFFF),
)


class PhysicalInputDeviceUsage(IntEnum):
    """Usages of the Physical Input Device page."""

    Undefined = 0x00
    PhysicalInputDevice = 0x01
    Normal = 0x20
    SetEffectReport = 0x21
    EffectParameterBlockIndex = 0x22
    ParameterBlockOffset = 0x23
    ROMFlag = 0x24
    EffectType = 0x25
    ETConstant_Force = 0x26
    ETRamp = 0x27
    ETCustom_Force = 0x28
    ETSquare = 0x30
    ETSine = 0x31
    ETTriangle = 0x32
    ETSawtoothUp = 0x33
    ETSawtoothDown = 0x34
    ETSpring = 0x40
    ETDamper = 0x41
    ETInertia = 0x42
    ETFriction = 0x43
    Duration = 0x50
    SamplePeriod = 0x51
    Gain = 0x52
    TriggerButton = 0x53
    TriggerRepeatInterval = 0x54
    AxesEnable = 0x55
    DirectionEnable = 0x56
    Direction = 0x57
    TypeSpecificBlockOffset = 0x58
    BlockType = 0x59
    SetEnvelopeReport = 0x5A
    AttackLevel = 0x5B
    AttackTime = 0x5C
    FadeLevel = 0x5D
    FadeTime = 0x5E
    SetConditionReport = 0x5F
    Center_PointOffset = 0x60
    PositiveCoefficient = 0x61
    NegativeCoefficient = 0x62
    PositiveSaturation = 0x63
    NegativeSaturation = 0x64
    DeadBand = 0x65
    DownloadForceSample = 0x66
    IsochCustom_ForceEnable = 0x67
    Custom_ForceDataReport = 0x68
    Custom_ForceData = 0x69
    Custom_ForceVendorDefinedData = 0x6A
    SetCustom_ForceReport = 0x6B
    Custom_ForceDataOffset = 0x6C
    SampleCount = 0x6D
    SetPeriodicReport = 0x6E
    Offset = 0x6F
    Magnitude = 0x70
    Phase = 0x71
    Period = 0x72
    SetConstant_ForceReport = 0x73
    SetRamp_ForceReport = 0x74
    RampStart = 0x75
    RampEnd = 0x76
    EffectOperationReport = 0x77
    EffectOperation = 0x78
    OpEffectStart = 0x79
    OpEffectStartSolo = 0x7A
    OpEffectStop = 0x7B
    LoopCount = 0x7C
    DeviceGainReport = 0x7D
    DeviceGain = 0x7E
    ParameterBlockPoolsReport = 0x7F
    RAMPoolSize = 0x80
    ROMPoolSize = 0x81
    ROMEffectBlockCount = 0x82
    SimultaneousEffectsMax = 0x83
    PoolAlignment = 0x84
    ParameterBlockMoveReport = 0x85
    MoveSource = 0x86
    MoveDestination = 0x87
    MoveLength = 0x88
    EffectParameterBlockLoadReport = 0x89
    Reserved8A = 0x8A
    EffectParameterBlockLoadStatus = 0x8B
    BlockLoadSuccess = 0x8C
    BlockLoadFull = 0x8D
    BlockLoadError = 0x8E
    BlockHandle = 0x8F
    EffectParameterBlockFreeReport = 0x90
    TypeSpecificBlockHandle = 0x91
    PIDStateReport = 0x92
    Reserved93 = 0x93
    EffectPlaying = 0x94
    PIDDeviceControlReport = 0x95
    PIDDeviceControl = 0x96
    DCEnableActuators = 0x97
    DCDisableActuators = 0x98
    DCStopAllEffects = 0x99
    DCReset = 0x9A
    DCPause = 0x9B
    DCContinue = 0x9C
    DevicePaused = 0x9F
    ActuatorsEnabled = 0xA0
    SafetySwitch = 0xA4
    ActuatorOverrideSwitch = 0xA5
    ActuatorPower = 0xA6
    StartDelay = 0xA7
    ParameterBlockSize = 0xA8
    Device_ManagedPool = 0xA9
    SharedParameterBlocks = 0xAA
    CreateNewEffectParameterBlockReport = 0xAB
    RAMPoolAvailable = 0xAC

    @classmethod
    def from_value(cls, value) -> PhysicalInputDeviceUsage | ReservedUsage:
        """Decode a usage id; ids that do not fit in 16 bits decode as Undefined."""
        return decode(value, cls, _RANGES, 0)