"""Named usages for USB HID usage pages, decoded from raw usage IDs.

Covers several HID usage pages, the 8-bit preferred colors, and tables of the
Sensors page collection and data field usages.
"""

__version__ = "0.1.0"