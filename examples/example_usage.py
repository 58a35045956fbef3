"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; all computation lives in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.classtrack.classtrack.attendance.model import AttendanceRecord
from src.classtrack.classtrack.common.datetime_utils import parse_iso_date
from src.classtrack.classtrack.container import build_container
from src.classtrack.classtrack.core.enums import AttendanceStatus
from src.classtrack.classtrack.timetable.catalog import build_default_catalog


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(catalog=build_default_catalog(), term_start=parse_iso_date(settings.TERM_START_DATE))

    records = [
        AttendanceRecord(
            record_id=f"demo_2025-12-10_wed_{n}",
            owner_id="demo",
            timetable_slot_id=f"wed_{n}",
            date=date(2025, 12, 10),
            status=AttendanceStatus.PRESENT,
        )
        for n in range(1, 8)
    ]
    report = container.report_service.build_report(records, [], date(2025, 12, 13))
    print(report.stats.overall)
    print(report.missing_dates)


if __name__ == "__main__":
    main()
