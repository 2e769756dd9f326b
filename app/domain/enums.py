"""Shift and record-type enumerations shared by models, schemas and queries."""

from enum import Enum, IntEnum
from typing import Optional


class Shift(IntEnum):
    MORNING = 1
    EVENING = 2
    NIGHT = 3

    @property
    def label(self) -> str:
        return SHIFT_LABELS[self]

    @property
    def time_range(self) -> str:
        return SHIFT_TIMES[self]


SHIFT_LABELS = {
    Shift.MORNING: "Morning",
    Shift.EVENING: "Evening",
    Shift.NIGHT: "Night",
}

SHIFT_TIMES = {
    Shift.MORNING: "8:00 AM - 4:00 PM",
    Shift.EVENING: "4:00 PM - 12:00 AM",
    Shift.NIGHT: "12:00 AM - 8:00 AM",
}

UNKNOWN = "Unknown"


def describe_shift(value: Optional[int]) -> tuple[str, str]:
    """Return (label, clock range) for a stored shift value.

    Anything outside 1..3, including a missing user, maps to "Unknown".
    """
    try:
        shift = Shift(value)
    except ValueError:
        return UNKNOWN, UNKNOWN
    return shift.label, shift.time_range


class RecordType(str, Enum):
    SEARCH = "Search"
    SESSION = "Session"
    CLICK = "Click"


# Query-string value meaning "do not filter by record type"
ALL_RECORD_TYPES = "All"
