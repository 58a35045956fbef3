from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..attendance.aggregator import AttendanceAggregator
from ..attendance.gaps import GapDetector
from ..attendance.model import AttendanceRecord, HolidayMarker
from ..common.logger import get_logger
from ..timetable.model import TimetableCatalog
from .formatter import StatsFormatter, StatsReport

log = get_logger("stats.service")


@dataclass(frozen=True)
class AttendanceReport:
    stats: StatsReport
    missing_dates: list[str]


class AttendanceReportService:
    """Dashboard numbers for one student: formatted stats plus unmarked days."""

    def __init__(
        self,
        catalog: TimetableCatalog,
        term_start: date,
        *,
        aggregator: Optional[AttendanceAggregator] = None,
        gaps: Optional[GapDetector] = None,
        formatter: Optional[StatsFormatter] = None,
    ):
        self._aggregator = aggregator or AttendanceAggregator(catalog, term_start)
        self._gaps = gaps or GapDetector(catalog, term_start)
        self._formatter = formatter or StatsFormatter(catalog)

    def build_report(
        self,
        records: Sequence[AttendanceRecord],
        holidays: Sequence[HolidayMarker],
        today: date,
        *,
        owner_id: Optional[str] = None,
    ) -> AttendanceReport:
        if owner_id is not None:
            # unowned entries belong to whoever is asking
            records = [r for r in records if not r.owner_id or r.owner_id == owner_id]
            holidays = [h for h in holidays if not h.owner_id or h.owner_id == owner_id]

        agg = self._aggregator.aggregate(records, holidays, today)
        missing = self._gaps.find_missing_dates(records, holidays, today)
        log.debug(
            "report owner=%s today=%s total=%d attended=%d missing=%d",
            owner_id, today, agg.grand_total, agg.grand_attended, len(missing),
        )
        return AttendanceReport(stats=self._formatter.format(agg), missing_dates=missing)
