from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Marking stored for one timetable slot on one date."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


class SubjectType(str, Enum):
    THEORY = "THEORY"
    LAB = "LAB"


class SafetyStatus(str, Enum):
    """Overall compliance band against the minimum attendance threshold."""

    SAFE = "SAFE"
    WARNING = "WARNING"
    DANGER = "DANGER"


class DayStatus(str, Enum):
    """Calendar classification of a single date."""

    FULL = "full"
    PARTIAL = "partial"
    ABSENT = "absent"
    EMPTY = "empty"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"
    DISABLED = "disabled"
