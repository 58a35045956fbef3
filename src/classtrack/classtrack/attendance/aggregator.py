from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from ..common.datetime_utils import iter_dates, weekday_index
from ..common.logger import get_logger
from ..core.enums import AttendanceStatus
from ..timetable.model import TimetableCatalog
from .model import AttendanceRecord, HolidayMarker
from .records import effective_records, holiday_dates

log = get_logger("attendance.aggregator")


@dataclass
class SubjectTally:
    total: int = 0
    attended: int = 0


@dataclass
class AggregateResult:
    """Weighted totals per subject and overall (theory=1, lab=3 per slot-date)."""

    per_subject: dict[str, SubjectTally] = field(default_factory=dict)
    grand_total: int = 0
    grand_attended: int = 0

    def add(self, subject_id: str, weight: int, *, attended: bool) -> None:
        tally = self.per_subject.setdefault(subject_id, SubjectTally())
        tally.total += weight
        self.grand_total += weight
        if attended:
            tally.attended += weight
            self.grand_attended += weight


class AttendanceAggregator:
    """Expands the weekly timetable over the term and tallies weighted attendance.

    Past dates (term_start <= d < today) count every scheduled slot, marked or
    not. Dates from `today` on only count slots that actually have a record, so
    an unmarked day in progress never shows up as a deficit.
    """

    def __init__(self, catalog: TimetableCatalog, term_start: date):
        self._catalog = catalog
        self._term_start = term_start

    def aggregate(
        self,
        records: Iterable[AttendanceRecord],
        holidays: Iterable[HolidayMarker],
        today: date,
    ) -> AggregateResult:
        effective = effective_records(records)
        holidays_set = holiday_dates(holidays)
        present = {key for key, r in effective.items() if r.status == AttendanceStatus.PRESENT}

        result = AggregateResult(per_subject={s.subject_id: SubjectTally() for s in self._catalog.subjects})

        for day in iter_dates(self._term_start, today):
            if day in holidays_set:
                continue
            for slot in self._catalog.slots_for_weekday(weekday_index(day)):
                subject = self._catalog.subject(slot.subject_id)
                if not subject:
                    log.debug("slot %s references unknown subject %s", slot.slot_id, slot.subject_id)
                    continue
                result.add(subject.subject_id, subject.weight, attended=(day, slot.slot_id) in present)

        for (day, slot_id), r in effective.items():
            if day < today or day < self._term_start or day in holidays_set:
                continue
            slot = self._catalog.slot(slot_id)
            subject = self._catalog.subject(slot.subject_id) if slot else None
            if not subject:
                log.debug("skipping orphan record %s (slot %s)", r.record_id, slot_id)
                continue
            result.add(subject.subject_id, subject.weight, attended=r.status == AttendanceStatus.PRESENT)

        return result
