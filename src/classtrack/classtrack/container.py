from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .attendance.aggregator import AttendanceAggregator
from .attendance.day_view import AttendanceCalendar
from .attendance.gaps import GapDetector
from .stats.formatter import StatsFormatter
from .stats.service import AttendanceReportService
from .timetable.model import TimetableCatalog


@dataclass(frozen=True)
class Container:
    catalog: TimetableCatalog
    term_start: date

    gap_detector: GapDetector
    calendar: AttendanceCalendar
    report_service: AttendanceReportService


def build_container(*, catalog: TimetableCatalog, term_start: date) -> Container:
    aggregator = AttendanceAggregator(catalog, term_start)
    gap_detector = GapDetector(catalog, term_start)
    formatter = StatsFormatter(catalog)
    calendar = AttendanceCalendar(catalog, term_start)
    report_service = AttendanceReportService(
        catalog,
        term_start,
        aggregator=aggregator,
        gaps=gap_detector,
        formatter=formatter,
    )

    return Container(
        catalog=catalog,
        term_start=term_start,
        gap_detector=gap_detector,
        calendar=calendar,
        report_service=report_service,
    )
