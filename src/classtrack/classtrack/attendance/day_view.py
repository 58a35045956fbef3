from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, time
from typing import Iterable, Optional

from ..common.datetime_utils import day_name, weekday_index
from ..core.constants import SUNDAY
from ..core.enums import AttendanceStatus, DayStatus
from ..core.exceptions import ValidationError
from ..timetable.model import TimetableCatalog
from .model import AttendanceRecord, HolidayMarker
from .records import effective_records, holiday_dates, records_by_date


@dataclass(frozen=True)
class SheetEntry:
    slot_id: str
    subject_id: str
    subject_name: str
    display_name: str
    weight: int
    start_time: time
    end_time: time
    status: Optional[AttendanceStatus]


@dataclass(frozen=True)
class DailySheet:
    """Read-model for marking one day's classes."""

    date: date
    day_name: str
    is_holiday: bool
    is_future: bool
    entries: list[SheetEntry]


class AttendanceCalendar:
    """Per-day views over the timetable: calendar colouring and the daily sheet."""

    def __init__(self, catalog: TimetableCatalog, term_start: date):
        self._catalog = catalog
        self._term_start = term_start

    def _classify(self, day: date, day_records: list[AttendanceRecord], is_holiday: bool) -> DayStatus:
        if is_holiday:
            return DayStatus.HOLIDAY
        if day < self._term_start:
            return DayStatus.DISABLED

        weekday = weekday_index(day)
        expected = self._catalog.slots_for_weekday(weekday)
        if weekday == SUNDAY or not expected:
            return DayStatus.WEEKEND
        if not day_records:
            return DayStatus.EMPTY

        present = sum(1 for r in day_records if r.status == AttendanceStatus.PRESENT)
        absent = len(day_records) - present
        if present == len(expected) and absent == 0:
            return DayStatus.FULL
        if present == 0 and absent > 0:
            return DayStatus.ABSENT
        return DayStatus.PARTIAL

    def day_status(
        self,
        day: date,
        records: Iterable[AttendanceRecord],
        holidays: Iterable[HolidayMarker],
    ) -> DayStatus:
        day_records = [r for (d, _), r in effective_records(records).items() if d == day]
        return self._classify(day, day_records, day in holiday_dates(holidays))

    def month_statuses(
        self,
        year: int,
        month: int,
        records: Iterable[AttendanceRecord],
        holidays: Iterable[HolidayMarker],
    ) -> list[tuple[date, DayStatus]]:
        if not 1 <= month <= 12 or not 1 <= year <= 9999:
            raise ValidationError(f"Invalid month: {year}-{month}")

        by_date = records_by_date(effective_records(records))
        holidays_set = holiday_dates(holidays)

        _, days_in_month = calendar.monthrange(year, month)
        out = []
        for n in range(1, days_in_month + 1):
            day = date(year, month, n)
            out.append((day, self._classify(day, by_date.get(day, []), day in holidays_set)))
        return out

    def daily_sheet(
        self,
        day: date,
        records: Iterable[AttendanceRecord],
        holidays: Iterable[HolidayMarker],
        today: date,
    ) -> DailySheet:
        effective = effective_records(records)
        weekday = weekday_index(day)

        entries: list[SheetEntry] = []
        for slot in sorted(self._catalog.slots_for_weekday(weekday), key=lambda s: s.start_time):
            subject = self._catalog.subject(slot.subject_id)
            if not subject:
                continue
            record = effective.get((day, slot.slot_id))
            entries.append(
                SheetEntry(
                    slot_id=slot.slot_id,
                    subject_id=subject.subject_id,
                    subject_name=subject.name,
                    display_name=slot.display_name or subject.name,
                    weight=subject.weight,
                    start_time=slot.start_time,
                    end_time=slot.end_time,
                    status=record.status if record else None,
                )
            )

        return DailySheet(
            date=day,
            day_name=day_name(weekday),
            is_holiday=day in holiday_dates(holidays),
            is_future=day > today,
            entries=entries,
        )
