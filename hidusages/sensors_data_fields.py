"""Property and data field usages of the Sensors page (0x20), ids 0x0100 to 0x07FF.

These usages apply to properties and data fields. They are grouped by the
sensor category that commonly uses them, but any sensor may report any of
them where that makes sense. Ids 0x0300 to 0x03FF and the timestamp at
0x0529 are used by all sensors.
"""

from __future__ import annotations

from typing import Tuple

from .sensors_collections import _expand, _LayoutItem
from .usage import UsageRange

FIRST_ID = 0x0100
LAST_ID = 0x07FF

# A bare name takes the next id; a (name, last) pair spans the next id up to
# ``last`` inclusive and marks a reserved range.
_LAYOUT: Tuple[_LayoutItem, ...] = (
    ("Reserved100_1FF", 0x1FF),
    "Event",
    "EventSensorState",
    "EventSensorEvent",
    ("Reserved203_2FF", 0x2FF),
    "Property",
    "PropertyFriendlyName",
    "PropertyPersistentUniqueID",
    "PropertySensorStatus",
    "PropertyMinimumReportInterval",
    "PropertySensorManufacturer",
    "PropertySensorModel",
    "PropertySensorSerialNumber",
    "PropertySensorDescription",
    "PropertySensorConnectionType",
    "PropertySensorDevicePath",
    "PropertyHardwareRevision",
    "PropertyFirmwareVersion",
    "PropertyReleaseDate",
    "PropertyReportInterval",
    "PropertyChangeSensitivityAbsolute",
    "PropertyChangeSensitivityPercentofRange",
    "PropertyChangeSensitivityPercentRelative",
    "PropertyAccuracy",
    "PropertyResolution",
    "PropertyMaximum",
    "PropertyMinimum",
    "PropertyReportingState",
    "PropertySamplingRate",
    "PropertyResponseCurve",
    "PropertyPowerState",
    "PropertyMaximumFIFOEvents",
    "PropertyReportLatency",
    "PropertyFlushFIFOEvents",
    "PropertyMaximumPowerConsumption",
    "PropertyIsPrimary",
    "PropertyHumanPresenceDetectionType",
    ("Reserved320_3FF", 0x3FF),
    "DataFieldLocation",
    "Reserved401",
    "DataFieldAltitudeAntennaSeaLevel",
    "DataFieldDifferentialReferenceStationID",
    "DataFieldAltitudeEllipsoidError",
    "DataFieldAltitudeEllipsoid",
    "DataFieldAltitudeSeaLevelError",
    "DataFieldAltitudeSeaLevel",
    "DataFieldDifferentialGPSDataAge",
    "DataFieldErrorRadius",
    "DataFieldFixQuality",
    "DataFieldFixType",
    "DataFieldGeoidalSeparation",
    "DataFieldGPSOperationMode",
    "DataFieldGPSSelectionMode",
    "DataFieldGPSStatus",
    "DataFieldPositionDilutionofPrecision",
    "DataFieldHorizontalDilutionofPrecision",
    "DataFieldVerticalDilutionofPrecision",
    "DataFieldLatitude",
    "DataFieldLongitude",
    "DataFieldTRUEHeading",
    "DataFieldMagneticHeading",
    "DataFieldMagneticVariation",
    "DataFieldSpeed",
    "DataFieldSatellitesinView",
    "DataFieldSatellitesinViewAzimuth",
    "DataFieldSatellitesinViewElevation",
    "DataFieldSatellitesinViewIDs",
    "DataFieldSatellitesinViewPRNs",
    "DataFieldSatellitesinViewS_NRatios",
    "DataFieldSatellitesUsedCount",
    "DataFieldSatellitesUsedPRNs",
    "DataFieldNMEASentence",
    "DataFieldAddressLine1",
    "DataFieldAddressLine2",
    "DataFieldCity",
    "DataFieldStateorProvince",
    "DataFieldCountryorRegion",
    "DataFieldPostalCode",
    ("Reserved428_429", 0x429),
    "PropertyLocation",
    "PropertyLocationDesiredAccuracy",
    ("Reserved42C_42F", 0x42F),
    "DataFieldEnvironmental",
    "DataFieldAtmosphericPressure",
    "Reserved432",
    "DataFieldRelativeHumidity",
    "DataFieldTemperature",
    "DataFieldWindDirection",
    "DataFieldWindSpeed",
    "DataFieldAirQualityIndex",
    "DataFieldEquivalentCO2",
    "DataFieldVolatileOrganicCompoundConcentration",
    "DataFieldObjectPresence",
    "DataFieldObjectProximityRange",
    "DataFieldObjectProximityOutofRange",
    ("Reserved43D_43F", 0x43F),
    "PropertyEnvironmental",
    "PropertyReferencePressure",
    ("Reserved442_44F", 0x44F),
    "DataFieldMotion",
    "DataFieldMotionState",
    "DataFieldAcceleration",
    "DataFieldAccelerationAxisX",
    "DataFieldAccelerationAxisY",
    "DataFieldAccelerationAxisZ",
    "DataFieldAngularVelocity",
    "DataFieldAngularVelocityaboutXAxis",
    "DataFieldAngularVelocityaboutYAxis",
    "DataFieldAngularVelocityaboutZAxis",
    "DataFieldAngularPosition",
    "DataFieldAngularPositionaboutXAxis",
    "DataFieldAngularPositionaboutYAxis",
    "DataFieldAngularPositionaboutZAxis",
    "DataFieldMotionSpeed",
    "DataFieldMotionIntensity",
    ("Reserved460_46F", 0x46F),
    "DataFieldOrientation",
    "DataFieldHeading",
    "DataFieldHeadingXAxis",
    "DataFieldHeadingYAxis",
    "DataFieldHeadingZAxis",
    "DataFieldHeadingCompensatedMagneticNorth",
    "DataFieldHeadingCompensatedTRUENorth",
    "DataFieldHeadingMagneticNorth",
    "DataFieldHeadingTRUENorth",
    "DataFieldDistance",
    "DataFieldDistanceXAxis",
    "DataFieldDistanceYAxis",
    "DataFieldDistanceZAxis",
    "DataFieldDistanceOut_of_Range",
    "DataFieldTilt",
    "DataFieldTiltXAxis",
    "DataFieldTiltYAxis",
    "DataFieldTiltZAxis",
    "DataFieldRotationMatrix",
    "DataFieldQuaternion",
    "DataFieldMagneticFlux",
    "DataFieldMagneticFluxXAxis",
    "DataFieldMagneticFluxYAxis",
    "DataFieldMagneticFluxZAxis",
    "DataFieldMagnetometerAccuracy",
    "DataFieldSimpleOrientationDirection",
    ("Reserved48A_48F", 0x48F),
    "DataFieldMechanical",
    "DataFieldBooleanSwitchState",
    "DataFieldBooleanSwitchArrayStates",
    "DataFieldMultivalueSwitchValue",
    "DataFieldForce",
    "DataFieldAbsolutePressure",
    "DataFieldGaugePressure",
    "DataFieldStrain",
    "DataFieldWeight",
    ("Reserved499_49F", 0x49F),
    "PropertyMechanical",
    "PropertyVibrationState",
    "PropertyForwardVibrationSpeed",
    "PropertyBackwardVibrationSpeed",
    ("Reserved4A4_4AF", 0x4AF),
    "FieldBiometric",
    "DataFieldHumanPresence",
    "DataFieldHumanProximityRange",
    "DataFieldHumanProximityOutofRange",
    "DataFieldHumanTouchState",
    "DataFieldBloodPressure",
    "DataFieldBloodPressureDiastolic",
    "DataFieldBloodPressureSystolic",
    "DataFieldHeartRate",
    "DataFieldRestingHeartRate",
    "DataFieldHeartbeatInterval",
    "DataFieldRespiratoryRate",
    "DataFieldSpO2",
    "DataFieldHumanAttentionDetected",
    "DataFieldHumanHeadAzimuth",
    "DataFieldHumanHeadAltitude",
    "DataFieldHumanHeadRoll",
    "DataFieldHumanHeadPitch",
    "DataFieldHumanHeadYaw",
    "DataFieldHumanCorrelationId",
    ("Reserved4C4_4CF", 0x4CF),
    "DataFieldLight",
    "DataFieldIlluminance",
    "DataFieldColorTemperature",
    "DataFieldChromaticity",
    "DataFieldChromaticityX",
    "DataFieldChromaticityY",
    "DataFieldConsumerIRSentenceReceive",
    "DataFieldInfraredLight",
    "DataFieldRedLight",
    "DataFieldGreenLight",
    "DataFieldBlueLight",
    "DataFieldUltravioletALight",
    "DataFieldUltravioletBLight",
    "DataFieldUltravioletIndex",
    "DataFieldNearInfraredLight",
    "PropertyLight",
    "PropertyConsumerIRSentenceSend",
    "Reserved4E1",
    "AutoBrightnessPreferred",
    "PropertyAutoColorPreferred",
    ("Reserved4E4_4EF", 0x4EF),
    "DataFieldScanner",
    "DataFieldRFIDTag40Bit",
    "DataFieldNFCSentenceReceive",
    ("Reserved4F3_4F7", 0x4F7),
    "PropertyScanner",
    "PropertyNFCSentenceSend",
    ("Reserved4FA_4FF", 0x4FF),
    "DataFieldElectrical",
    "DataFieldCapacitance",
    "DataFieldCurrent",
    "DataFieldElectricalPower",
    "DataFieldInductance",
    "DataFieldResistance",
    "DataFieldVoltage",
    "DataFieldFrequency",
    "DataFieldPeriod",
    "DataFieldPercentofRange",
    ("Reserved50A_51F", 0x51F),
    "DataFieldTime",
    "DataFieldYear",
    "DataFieldMonth",
    "DataFieldDay",
    "DataFieldDayofWeek",
    "DataFieldHour",
    "DataFieldMinute",
    "DataFieldSecond",
    "DataFieldMillisecond",
    "DataFieldTimestamp",
    "DataFieldJulianDayofYear",
    "DataFieldTimeSinceSystemBoot",
    ("Reserved52C_52F", 0x52F),
    "PropertyTime",
    "PropertyTimeZoneOffsetfromUTC",
    "PropertyTimeZoneName",
    "PropertyDaylightSavingsTimeObserved",
    "PropertyTimeTrimAdjustment",
    "PropertyArmAlarm",
    ("Reserved536_53F", 0x53F),
    "DataFieldCustom",
    "DataFieldCustomUsage",
    "DataFieldCustomBooleanArray",
    "DataFieldCustomValue",
    *(f"DataFieldCustomValue{n}" for n in range(1, 29)),
    "DataFieldGeneric",
    "DataFieldGenericGUIDorPROPERTYKEY",
    "DataFieldGenericCategoryGUID",
    "DataFieldGenericTypeGUID",
    "DataFieldGenericEventPROPERTYKEY",
    "DataFieldGenericPropertyPROPERTYKEY",
    "DataFieldGenericDataFieldPROPERTYKEY",
    "DataFieldGenericEvent",
    "DataFieldGenericProperty",
    "DataFieldGenericDataField",
    "DataFieldEnumeratorTableRowIndex",
    "DataFieldEnumeratorTableRowCount",
    "DataFieldGenericGUIDorPROPERTYKEYkind",
    "DataFieldGenericGUID",
    "DataFieldGenericPROPERTYKEY",
    "DataFieldGenericTopLevelCollectionID",
    "DataFieldGenericReportID",
    "DataFieldGenericReportItemPositionIndex",
    "DataFieldGenericFirmwareVARTYPE",
    "DataFieldGenericUnitofMeasure",
    "DataFieldGenericUnitExponent",
    "DataFieldGenericReportSize",
    "DataFieldGenericReportCount",
    ("Reserved577_57F", 0x57F),
    "PropertyGeneric",
    "PropertyEnumeratorTableRowIndex",
    "PropertyEnumeratorTableRowCount",
    ("Reserved583_58F", 0x58F),
    "DataFieldPersonalActivity",
    "DataFieldActivityType",
    "DataFieldActivityState",
    "DataFieldDevicePosition",
    "DataFieldStepCount",
    "DataFieldStepCountReset",
    "DataFieldStepDuration",
    "DataFieldStepType",
    ("Reserved598_59F", 0x59F),
    "PropertyMinimumActivityDetectionInterval",
    "PropertySupportedActivityTypes",
    "PropertySubscribedActivityTypes",
    "PropertySupportedStepTypes",
    "PropertySubscribedStepTypes",
    "PropertyFloorHeight",
    ("Reserved5A6_5AF", 0x5AF),
    "DataFieldCustomTypeID",
    ("Reserved5B1_5BF", 0x5BF),
    "PropertyCustom",
    *(f"PropertyCustomValue{n}" for n in range(1, 17)),
    ("Reserved5D1_5DF", 0x5DF),
    "DataFieldHinge",
    "DataFieldHingeAngle",
    ("Reserved5E2_5EF", 0x5EF),
    "DataFieldGestureSensor",
    "DataFieldGestureState",
    "DataFieldHingeFoldInitialAngle",
    "DataFieldHingeFoldFinalAngle",
    "DataFieldHingeFoldContributingPanel",
    "DataFieldHingeFoldType",
    ("Reserved5F6_7FF", 0x7FF),
)

_ENTRIES = _expand(_LAYOUT, FIRST_ID, LAST_ID)


def data_field_entries() -> Tuple[UsageRange, ...]:
    """The property and data field usages as ``(name, first, last)`` triples.

    Entries are in id order. A defined usage has ``first == last``; a
    reserved range spans several ids that all decode to the same usage.
    """
    return _ENTRIES