from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's marking for one timetable slot on one date."""

    record_id: str
    owner_id: str
    timetable_slot_id: str
    date: date
    status: AttendanceStatus


@dataclass(frozen=True)
class HolidayMarker:
    """A date the student declared as a holiday; nothing on it counts."""

    holiday_id: str
    owner_id: str
    date: date
