from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping

from .model import AttendanceRecord, HolidayMarker

RecordKey = tuple[date, str]


def effective_records(records: Iterable[AttendanceRecord]) -> dict[RecordKey, AttendanceRecord]:
    """Collapse duplicates into one record per (date, timetable_slot_id).

    Built in a single pass over `records`: the last record seen for a key wins,
    so the result is deterministic for a deterministically ordered input.
    """
    out: dict[RecordKey, AttendanceRecord] = {}
    for r in records:
        out[(r.date, r.timetable_slot_id)] = r
    return out


def holiday_dates(holidays: Iterable[HolidayMarker]) -> frozenset[date]:
    return frozenset(h.date for h in holidays)


def records_by_date(effective: Mapping[RecordKey, AttendanceRecord]) -> dict[date, list[AttendanceRecord]]:
    out: dict[date, list[AttendanceRecord]] = {}
    for (day, _), r in effective.items():
        out.setdefault(day, []).append(r)
    return out
