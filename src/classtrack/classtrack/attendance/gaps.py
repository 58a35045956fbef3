from __future__ import annotations

from datetime import date
from typing import Iterable

from ..common.datetime_utils import iter_dates, to_iso, weekday_index
from ..core.constants import SUNDAY
from ..timetable.model import TimetableCatalog
from .model import AttendanceRecord, HolidayMarker
from .records import holiday_dates


class GapDetector:
    """Finds past class days the student never opened.

    A day counts as covered as soon as any record exists for it, whatever the
    slot or status. Partially marked days are the aggregator's concern, not ours.
    """

    def __init__(self, catalog: TimetableCatalog, term_start: date):
        self._catalog = catalog
        self._term_start = term_start

    def find_missing_dates(
        self,
        records: Iterable[AttendanceRecord],
        holidays: Iterable[HolidayMarker],
        today: date,
    ) -> list[str]:
        """ISO dates in [term_start, today) with classes but zero records, newest first."""
        holidays_set = holiday_dates(holidays)
        marked_days = {r.date for r in records}

        missing: list[str] = []
        for day in iter_dates(self._term_start, today):
            if day in holidays_set:
                continue
            weekday = weekday_index(day)
            if weekday == SUNDAY or not self._catalog.has_classes_on(weekday):
                continue
            if day not in marked_days:
                missing.append(to_iso(day))

        missing.sort(reverse=True)
        return missing
