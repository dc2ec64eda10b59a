"""Scales page (0x8D)."""

from __future__ import annotations

from enum import IntEnum

from .usage import ReservedUsage, decode

PAGE = 0x8D

_RANGES = (
    ("Reserved02_1F", 0x02, 0x1F),
    ("Reserved2B_2F", 0x2B, 0x2F),
    ("Reserved36_3F", 0x36, 0x3F),
    ("Reserved42_4F", 0x42, 0x4F),
    ("Reserved5D_5F", 0x5D, 0x5F),
    ("Reserved62_6F", 0x62, 0x6F),
    ("Reserved79_7F", 0x79, 0x7F),
    ("Reserved82_FFFF", 0x82, 0xFFFF),
)


class ScalesUsage(IntEnum):
    """Usages of the Scales page."""

    Undefined = 0x00
    Scales = 0x01
    ScaleDevice = 0x20
    ScaleClass = 0x21
    ScaleClassIMetric = 0x22
    ScaleClassIIMetric = 0x23
    ScaleClassIIIMetric = 0x24
    ScaleClassIIILMetric = 0x25
    ScaleClassIVMetric = 0x26
    ScaleClassIIIEnglish = 0x27
    ScaleClassIIILEnglish = 0x28
    ScaleClassIVEnglish = 0x29
    ScaleClassGeneric = 0x2A
    ScaleAttributeReport = 0x30
    ScaleControlReport = 0x31
    ScaleDataReport = 0x32
    ScaleStatusReport = 0x33
    ScaleWeightLimitReport = 0x34
    ScaleStatisticsReport = 0x35
    DataWeight = 0x40
    DataScaling = 0x41
    WeightUnit = 0x50
    WeightUnitMilligram = 0x51
    WeightUnitGram = 0x52
    WeightUnitKilogram = 0x53
    WeightUnitCarats = 0x54
    WeightUnitTaels = 0x55
    WeightUnitGrains = 0x56
    WeightUnitPennyweights = 0x57
    WeightUnitMetricTon = 0x58
    WeightUnitAvoirTon = 0x59
    WeightUnitTroyOunce = 0x5A
    WeightUnitOunce = 0x5B
    WeightUnitPound = 0x5C
    CalibrationCount = 0x60
    Re_ZeroCount = 0x61
    ScaleStatus = 0x70
    ScaleStatusFault = 0x71
    ScaleStatusStableatCenterofZero = 0x72
    ScaleStatusInMotion = 0x73
    ScaleStatusWeightStable = 0x74
    ScaleStatusUnderZero = 0x75
    ScaleStatusOverWeightLimit = 0x76
    ScaleStatusRequiresCalibration = 0x77
    ScaleStatusRequiresRezeroing = 0x78
    ZeroScale = 0x80
    EnforcedZeroReturn = 0x81

    @classmethod
    def from_value(cls, value) -> ScalesUsage | ReservedUsage:
        """Decode a usage id; ids that do not fit in 16 bits decode as Undefined."""
        return decode(value, cls, _RANGES, 0)