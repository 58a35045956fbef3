from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..attendance.day_view import DailySheet
from ..common.datetime_utils import parse_iso_date, today_local
from ..common.logger import get_logger
from ..common.payloads import first_value, parse_holidays, parse_records
from ..core.exceptions import ValidationError
from ..container import Container
from ..stats.formatter import StatsReport
from ..timetable.catalog import catalog_to_dict

log = get_logger("api")


def register(app: Flask, container: Container) -> None:
    def _payload() -> dict:
        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def _today(data: dict) -> date:
        value = data.get("today")
        return parse_iso_date(value) if value else today_local()

    def _stats_to_json(report: StatsReport) -> dict:
        o = report.overall
        return {
            "overall": {
                "totalClasses": o.total_classes,
                "attendedClasses": o.attended_classes,
                "percentage": o.percentage,
                "status": o.status.value,
                "bunksAvailable": o.bunks_available,
            },
            "bySubject": [
                {
                    "subjectId": s.subject_id,
                    "subjectName": s.subject_name,
                    "totalClasses": s.total_classes,
                    "attendedClasses": s.attended_classes,
                    "percentage": s.percentage,
                }
                for s in report.by_subject
            ],
        }

    def _sheet_to_json(sheet: DailySheet) -> dict:
        return {
            "date": sheet.date.isoformat(),
            "dayName": sheet.day_name,
            "isHoliday": sheet.is_holiday,
            "isFuture": sheet.is_future,
            "classes": [
                {
                    "slotId": e.slot_id,
                    "subjectId": e.subject_id,
                    "subjectName": e.subject_name,
                    "displayName": e.display_name,
                    "weight": e.weight,
                    "start": e.start_time.strftime("%H:%M"),
                    "end": e.end_time.strftime("%H:%M"),
                    "status": e.status.value if e.status else None,
                }
                for e in sheet.entries
            ],
        }

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        log.info("rejected request %s: %s", request.path, e)
        return jsonify({"success": False, "message": str(e)}), 400

    @app.route("/api/timetable", methods=["GET"], endpoint="api_timetable")
    def api_timetable():
        body = catalog_to_dict(container.catalog)
        body["termStart"] = container.term_start.isoformat()
        return jsonify(body)

    @app.route("/api/stats", methods=["POST"], endpoint="api_stats")
    def api_stats():
        data = _payload()
        owner_id = first_value(data, "owner_id", "ownerId", "userId")
        report = container.report_service.build_report(
            parse_records(data.get("records")),
            parse_holidays(data.get("holidays")),
            _today(data),
            owner_id=str(owner_id) if owner_id else None,
        )
        body = _stats_to_json(report.stats)
        body["missingDates"] = report.missing_dates
        return jsonify(body)

    @app.route("/api/missing-dates", methods=["POST"], endpoint="api_missing_dates")
    def api_missing_dates():
        data = _payload()
        missing = container.gap_detector.find_missing_dates(
            parse_records(data.get("records")),
            parse_holidays(data.get("holidays")),
            _today(data),
        )
        return jsonify({"missingDates": missing})

    @app.route("/api/calendar/<int:year>/<int:month>", methods=["POST"], endpoint="api_calendar")
    def api_calendar(year: int, month: int):
        data = _payload()
        statuses = container.calendar.month_statuses(
            year,
            month,
            parse_records(data.get("records")),
            parse_holidays(data.get("holidays")),
        )
        return jsonify({"days": [{"date": d.isoformat(), "status": s.value} for d, s in statuses]})

    @app.route("/api/day/<day>", methods=["POST"], endpoint="api_day")
    def api_day(day: str):
        data = _payload()
        sheet = container.calendar.daily_sheet(
            parse_iso_date(day),
            parse_records(data.get("records")),
            parse_holidays(data.get("holidays")),
            _today(data),
        )
        return jsonify(_sheet_to_json(sheet))
