"""Collection usages of the Sensors page (0x20), ids 0x00 to 0xFF.

These usages apply to collections and stand for sensor objects: sensor
categories and the sensor types within them. Ids 0x0100 to 0x07FF are
properties and data fields, ids 0x0800 to 0x0FFF are selectors for named
array enumerations, ids 0x1000 to 0xEFFF are properties or data fields with
modifiers in their top four bits, and ids from 0xF000 upward are kept for
vendors.
"""

from __future__ import annotations

from typing import Tuple, Union

from .usage import UsageRange

FIRST_ID = 0x00
LAST_ID = 0xFF

# A bare name takes the next id; a (name, last) pair spans the next id up to
# ``last`` inclusive and marks a reserved range.
_LayoutItem = Union[str, Tuple[str, int]]

_LAYOUT: Tuple[_LayoutItem, ...] = (
    "Undefined",
    "Sensor",
    ("Reserved02_0F", 0x0F),
    "Biometric",
    "BiometricHumanPresence",
    "BiometricHumanProximity",
    "BiometricHumanTouch",
    "BiometricBloodPressure",
    "BiometricBodyTemperature",
    "BiometricHeartRate",
    "BiometricHeartRateVariability",
    "BiometricPeripheralOxygenSaturation",
    "BiometricRespiratoryRate",
    ("Reserved1A_1F", 0x1F),
    "Electrical",
    "ElectricalCapacitance",
    "ElectricalCurrent",
    "ElectricalPower",
    "ElectricalInductance",
    "ElectricalResistance",
    "ElectricalVoltage",
    "ElectricalPotentiometer",
    "ElectricalFrequency",
    "ElectricalPeriod",
    ("Reserved2A_2F", 0x2F),
    "Environmental",
    "EnvironmentalAtmosphericPressure",
    "EnvironmentalHumidity",
    "EnvironmentalTemperature",
    "EnvironmentalWindDirection",
    "EnvironmentalWindSpeed",
    "EnvironmentalAirQuality",
    "EnvironmentalHeatIndex",
    "EnvironmentalSurfaceTemperature",
    "EnvironmentalVolatileOrganicCompounds",
    "EnvironmentalObjectPresence",
    "EnvironmentalObjectProximity",
    ("Reserved3C_3F", 0x3F),
    "Light",
    "LightAmbientLight",
    "LightConsumerInfrared",
    "LightInfraredLight",
    "LightVisibleLight",
    "LightUltravioletLight",
    ("Reserved46_4F", 0x4F),
    "Location",
    "LocationBroadcast",
    "LocationDeadReckoning",
    "LocationGPS_GlobalPositioningSystem",
    "LocationLookup",
    "LocationOther",
    "LocationStatic",
    "LocationTriangulation",
    ("Reserved58_5F", 0x5F),
    "Mechanical",
    "MechanicalBooleanSwitch",
    "MechanicalBooleanSwitchArray",
    "MechanicalMultivalueSwitch",
    "MechanicalForce",
    "MechanicalPressure",
    "MechanicalStrain",
    "MechanicalWeight",
    "MechanicalHapticVibrator",
    "MechanicalHallEffectSwitch",
    ("Reserved6A_6F", 0x6F),
    "Motion",
    "MotionAccelerometer1D",
    "MotionAccelerometer2D",
    "MotionAccelerometer3D",
    "MotionGyrometer1D",
    "MotionGyrometer2D",
    "MotionGyrometer3D",
    "MotionMotionDetector",
    "MotionSpeedometer",
    "MotionAccelerometer",
    "MotionGyrometer",
    "MotionGravityVector",
    "MotionLinearAccelerometer",
    ("Reserved7D_7F", 0x7F),
    "Orientation",
    "OrientationCompass1D",
    "OrientationCompass2D",
    "OrientationCompass3D",
    "OrientationInclinometer1D",
    "OrientationInclinometer2D",
    "OrientationInclinometer3D",
    "OrientationDistance1D",
    "OrientationDistance2D",
    "OrientationDistance3D",
    "OrientationDeviceOrientation",
    "OrientationCompass",
    "OrientationInclinometer",
    "OrientationDistance",
    "OrientationRelativeOrientation",
    "OrientationSimpleOrientation",
    "Scanner",
    "ScannerBarcode",
    "ScannerRFID",
    "ScannerNFC",
    ("Reserved94_9F", 0x9F),
    "Time",
    "TimeAlarmTimer",
    "TimeRealTimeClock",
    ("ReservedA3_AF", 0xAF),
    "PersonalActivity",
    "PersonalActivityActivityDetection",
    "PersonalActivityDevicePosition",
    "PersonalActivityFloorTracker",
    "PersonalActivityPedometer",
    "PersonalActivityStepDetection",
    ("ReservedB6_BF", 0xBF),
    "OrientationExtended",
    "OrientationExtendedGeomagneticOrientation",
    "OrientationExtendedMagnetometer",
    ("ReservedC3_CF", 0xCF),
    "Gesture",
    "GestureChassisFlipGesture",
    "GestureHingeFoldGesture",
    ("ReservedD3_DF", 0xDF),
    "Other",
    "OtherCustom",
    "OtherGeneric",
    "OtherGenericEnumerator",
    "OtherHingeAngle",
    ("ReservedE5_EF", 0xEF),
    "VendorReserved1",
    "VendorReserved2",
    "VendorReserved3",
    "VendorReserved4",
    "VendorReserved5",
    "VendorReserved6",
    "VendorReserved7",
    "VendorReserved8",
    "VendorReserved9",
    "VendorReserved10",
    "VendorReserved11",
    "VendorReserved12",
    "VendorReserved13",
    "VendorReserved14",
    "VendorReserved15",
    "VendorReserved16",
)


def _expand(layout, start: int, end: int) -> Tuple[UsageRange, ...]:
    entries = []
    next_id = start
    for item in layout:
        if isinstance(item, str):
            name, last = item, next_id
        else:
            name, last = item
        if last < next_id:
            raise ValueError(f"usage {name} ends before it starts")
        entries.append((name, next_id, last))
        next_id = last + 1
    if next_id != end + 1:
        raise ValueError(f"layout ends at {next_id - 1:#06x}, expected {end:#06x}")
    return tuple(entries)


_ENTRIES = _expand(_LAYOUT, FIRST_ID, LAST_ID)


def collection_entries() -> Tuple[UsageRange, ...]:
    """The collection usages as ``(name, first, last)`` triples in id order.

    A defined usage has ``first == last``; a reserved range spans several ids
    that all decode to the same usage, whose value is ``first``.
    """
    return _ENTRIES