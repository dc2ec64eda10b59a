"""Telephony Device page (0x0B).

Keytop and control usages for telephony devices. Many definitions are left
loose on purpose: the telephone software interprets the controls.
"""

from __future__ import annotations

from enum import IntEnum

from .usage import ReservedUsage, decode

PAGE = 0x0B

_RANGES = (
    ("Reserved08_1F", 0x08, 0x1F),
    ("Reserved32_4F", 0x32, 0x4F),
    ("Reserved54_6F", 0x54, 0x6F),
    ("Reserved75_8F", 0x75, 0x8F),
    ("Reserved9F_AF", 0x9F, 0xAF),
    ("ReservedC3_EF", 0xC3, 0xEF),
    ("ReservedF6_F7", 0xF6, 0xF7),
    ("ReservedFF_107", 0xFF, 0x107),
    ("Reserved10B_10F", 0x10B, 0x10F),
    ("Reserved115_13F", 0x115, 0x13F),
    ("Reserved148_149", 0x148, 0x149),
    ("Reserved14C_FFFF", 0x14C, 0xFFFF),
)


class TelephonyDeviceUsage(IntEnum):
    """Usages of the Telephony Device page."""

    Undefined = 0x00
    Phone = 0x01
    AnsweringMachine = 0x02
    MessageControls = 0x03
    Handset = 0x04
    Headset = 0x05
    TelephonyKeyPad = 0x06
    ProgrammableButton = 0x07
    HookSwitch = 0x20
    Flash = 0x21
    Feature = 0x22
    Hold = 0x23
    Redial = 0x24
    Transfer = 0x25
    Drop = 0x26
    Park = 0x27
    ForwardCalls = 0x28
    AlternateFunction = 0x29
    Line = 0x2A
    SpeakerPhone = 0x2B
    Conference = 0x2C
    RingEnable = 0x2D
    RingSelect = 0x2E
    PhoneMute = 0x2F
    CallerID = 0x30
    Send = 0x31
    SpeedDial = 0x50
    StoreNumber = 0x51
    RecallNumber = 0x52
    PhoneDirectory = 0x53
    VoiceMail = 0x70
    ScreenCalls = 0x71
    DoNotDisturb = 0x72
    Message = 0x73
    AnswerOn_Off = 0x74
    InsideDialTone = 0x90
    OutsideDialTone = 0x91
    InsideRingTone = 0x92
    OutsideRingTone = 0x93
    PriorityRingTone = 0x94
    InsideRingback = 0x95
    PriorityRingback = 0x96
    LineBusyTone = 0x97
    ReorderTone = 0x98
    CallWaitingTone = 0x99
    ConfirmationTone1 = 0x9A
    ConfirmationTone2 = 0x9B
    TonesOff = 0x9C
    OutsideRingback = 0x9D
    Ringer = 0x9E
    PhoneKey0 = 0xB0
    PhoneKey1 = 0xB1
    PhoneKey2 = 0xB2
    PhoneKey3 = 0xB3
    PhoneKey4 = 0xB4
    PhoneKey5 = 0xB5
    PhoneKey6 = 0xB6
    PhoneKey7 = 0xB7
    PhoneKey8 = 0xB8
    PhoneKey9 = 0xB9
    PhoneKeyStar = 0xBA
    PhoneKeyPound = 0xBB
    PhoneKeyA = 0xBC
    PhoneKeyB = 0xBD
    PhoneKeyC = 0xBE
    PhoneKeyD = 0xBF
    PhoneCallHistoryKey = 0xC0
    PhoneCallerIDKey = 0xC1
    PhoneSettingsKey = 0xC2
    HostControl = 0xF0
    HostAvailable = 0xF1
    HostCallActive = 0xF2
    ActivateHandsetAudio = 0xF3
    RingType = 0xF4
    Re_dialablePhoneNumber = 0xF5
    StopRingTone = 0xF8
    PSTNRingTone = 0xF9
    HostRingTone = 0xFA
    AlertSoundError = 0xFB
    AlertSoundConfirm = 0xFC
    AlertSoundNotification = 0xFD
    SilentRing = 0xFE
    EmailMessageWaiting = 0x108
    VoicemailMessageWaiting = 0x109
    HostHold = 0x10A
    IncomingCallHistoryCount = 0x110
    OutgoingCallHistoryCount = 0x111
    IncomingCallHistory = 0x112
    OutgoingCallHistory = 0x113
    PhoneLocale = 0x114
    PhoneTimeSecond = 0x140
    PhoneTimeMinute = 0x141
    PhoneTimeHour = 0x142
    PhoneDateDay = 0x143
    PhoneDateMonth = 0x144
    PhoneDateYear = 0x145
    HandsetNickname = 0x146
    AddressBookID = 0x147
    CallDuration = 0x14A
    DualModePhone = 0x14B

    @classmethod
    def from_value(cls, value) -> TelephonyDeviceUsage | ReservedUsage:
        """Decode a usage id; ids that do not fit in 16 bits decode as Undefined."""
        return decode(value, cls, _RANGES, 0)