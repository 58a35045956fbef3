"""Conversion of JSON payloads into domain entities.

Accepts both snake_case keys and the camelCase keys used by the web client
(`timetableEntryId`, `userId`).
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from ..attendance.model import AttendanceRecord, HolidayMarker
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def first_value(item: Mapping[str, Any], *keys: str) -> Optional[Any]:
    for k in keys:
        if item.get(k) not in (None, ""):
            return item[k]
    return None


def _as_list(value: Any, field_name: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValidationError(f"{field_name} must be a list")
    return value


def parse_record(item: Mapping[str, Any]) -> AttendanceRecord:
    if not isinstance(item, Mapping):
        raise ValidationError("Attendance record must be an object")

    slot_id = first_value(item, "timetable_slot_id", "timetableSlotId", "timetableEntryId")
    if slot_id is None:
        raise ValidationError("Attendance record is missing timetable_slot_id")

    raw_status = str(item.get("status") or "")
    try:
        status = AttendanceStatus(raw_status)
    except ValueError as e:
        raise ValidationError(f"Invalid attendance status: {raw_status!r}") from e

    day = parse_iso_date(item.get("date"))
    owner_id = str(first_value(item, "owner_id", "ownerId", "userId") or "")
    record_id = first_value(item, "id") or f"{owner_id}_{day.isoformat()}_{slot_id}"

    return AttendanceRecord(
        record_id=str(record_id),
        owner_id=owner_id,
        timetable_slot_id=str(slot_id),
        date=day,
        status=status,
    )


def parse_holiday(item: Mapping[str, Any]) -> HolidayMarker:
    if not isinstance(item, Mapping):
        raise ValidationError("Holiday must be an object")

    day = parse_iso_date(item.get("date"))
    owner_id = str(first_value(item, "owner_id", "ownerId", "userId") or "")
    return HolidayMarker(
        holiday_id=str(first_value(item, "id") or f"{owner_id}_{day.isoformat()}"),
        owner_id=owner_id,
        date=day,
    )


def parse_records(items: Any) -> list[AttendanceRecord]:
    return [parse_record(i) for i in _as_list(items, "records")]


def parse_holidays(items: Any) -> list[HolidayMarker]:
    return [parse_holiday(i) for i in _as_list(items, "holidays")]

