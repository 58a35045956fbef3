"""Timetable catalog loading.

The built-in catalog is the default weekly timetable; deployments may point
`TIMETABLE_FILE` at a JSON document with the same shape as `catalog_to_dict`.
"""
from __future__ import annotations

import json
from datetime import datetime, time
from pathlib import Path
from typing import Any, Mapping

from ..core.constants import LAB_WEIGHT, THEORY_WEIGHT
from ..core.enums import SubjectType
from ..core.exceptions import ValidationError
from .model import Subject, TimetableCatalog, TimetableSlot


def _theory(subject_id: str, name: str) -> Subject:
    return Subject(subject_id=subject_id, name=name, subject_type=SubjectType.THEORY, weight=THEORY_WEIGHT)


def _lab(subject_id: str, name: str) -> Subject:
    return Subject(subject_id=subject_id, name=name, subject_type=SubjectType.LAB, weight=LAB_WEIGHT)


DEFAULT_SUBJECTS = (
    _theory("EVS", "Environmental Science"),
    _theory("DL_CO", "DL & CO"),
    _theory("P_S", "Prob & Stats"),
    _theory("ML", "Machine Learning"),
    _theory("DTI", "Design Thinking"),
    _theory("DBMS", "DBMS"),
    _theory("OT", "Optimization Tech"),
    _theory("COUNSELING", "Counseling"),
    _lab("AI_ML_LAB", "AI & ML Lab"),
    _lab("FSD_LAB", "Full Stack Lab"),
    _lab("DBMS_LAB", "DBMS Lab"),
)

# (slot_id, weekday, subject_id, start, end, display_name); weekday 1 = Monday
DEFAULT_SLOTS = (
    ("mon_1", 1, "EVS", "09:30", "10:20", None),
    ("mon_2", 1, "DL_CO", "10:20", "11:10", None),
    ("mon_3", 1, "P_S", "11:10", "12:00", None),
    ("mon_4", 1, "DL_CO", "12:00", "12:50", "DL&CO (CLC)"),
    ("mon_5", 1, "ML", "13:50", "14:40", "ML (CLC)"),
    ("mon_6", 1, "DTI", "14:40", "15:30", None),
    ("mon_7", 1, "COUNSELING", "15:30", "16:20", None),
    ("tue_1", 2, "DBMS", "09:30", "10:20", None),
    ("tue_2", 2, "AI_ML_LAB", "10:20", "12:50", "AI & ML LAB"),
    ("tue_3", 2, "P_S", "13:50", "14:40", None),
    ("tue_4", 2, "OT", "14:40", "15:30", None),
    ("tue_5", 2, "OT", "15:30", "16:20", "OT (CLC)"),
    ("wed_1", 3, "DL_CO", "09:30", "10:20", None),
    ("wed_2", 3, "EVS", "10:20", "11:10", None),
    ("wed_3", 3, "OT", "11:10", "12:00", None),
    ("wed_4", 3, "DTI", "12:00", "12:50", None),
    ("wed_5", 3, "DBMS", "13:50", "14:40", None),
    ("wed_6", 3, "ML", "14:40", "15:30", None),
    ("wed_7", 3, "P_S", "15:30", "16:20", None),
    ("thu_1", 4, "DBMS", "09:30", "10:20", None),
    ("thu_2", 4, "ML", "10:20", "11:10", None),
    ("thu_3", 4, "P_S", "11:10", "12:00", "P&S (CLC)"),
    ("thu_4", 4, "OT", "12:00", "12:50", None),
    ("thu_5", 4, "DTI", "13:50", "14:40", "DTI (CLC)"),
    ("thu_6", 4, "DL_CO", "14:40", "15:30", None),
    ("thu_7", 4, "DBMS", "15:30", "16:20", "DBMS (CLC)"),
    ("fri_1", 5, "ML", "09:30", "10:20", None),
    ("fri_2", 5, "FSD_LAB", "10:20", "12:50", "FSD-I LAB"),
    ("fri_3", 5, "P_S", "13:50", "14:40", None),
    ("fri_4", 5, "DTI", "14:40", "15:30", None),
    ("fri_5", 5, "OT", "15:30", "16:20", None),
    ("sat_1", 6, "DTI", "09:30", "10:20", None),
    ("sat_2", 6, "ML", "10:20", "11:10", None),
    ("sat_3", 6, "DBMS", "11:10", "12:00", None),
    ("sat_4", 6, "DL_CO", "12:00", "12:50", None),
    ("sat_5", 6, "DBMS_LAB", "13:50", "16:20", "DBMS LAB"),
)


def _parse_time(value: str, field_name: str) -> time:
    try:
        return datetime.strptime(value, "%H:%M").time()
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid {field_name} time: {value!r} (expected HH:MM)") from e


def build_default_catalog() -> TimetableCatalog:
    slots = [
        TimetableSlot(
            slot_id=slot_id,
            weekday=weekday,
            subject_id=subject_id,
            start_time=_parse_time(start, "start"),
            end_time=_parse_time(end, "end"),
            display_name=display_name,
        )
        for slot_id, weekday, subject_id, start, end, display_name in DEFAULT_SLOTS
    ]
    return TimetableCatalog(subjects=DEFAULT_SUBJECTS, slots=slots)


def _require(item: Mapping[str, Any], key: str, kind: str) -> Any:
    if not isinstance(item, Mapping):
        raise ValidationError(f"{kind} entry must be an object, got {item!r}")
    if key not in item or item[key] in (None, ""):
        raise ValidationError(f"{kind} entry is missing '{key}'")
    return item[key]


def load_catalog(data: Mapping[str, Any]) -> TimetableCatalog:
    """Build a catalog from `{"subjects": [...], "slots": [...]}`.

    Fails fast on bad weights, weekdays, duplicate ids or dangling subject refs.
    """
    subjects: list[Subject] = []
    seen_subjects: set[str] = set()
    for item in data.get("subjects") or []:
        subject_id = str(_require(item, "id", "Subject"))
        if subject_id in seen_subjects:
            raise ValidationError(f"Duplicate subject id: {subject_id}")
        seen_subjects.add(subject_id)

        try:
            subject_type = SubjectType(str(item.get("type", SubjectType.THEORY.value)).upper())
        except ValueError as e:
            raise ValidationError(f"Subject {subject_id} has unknown type {item.get('type')!r}") from e

        default_weight = LAB_WEIGHT if subject_type == SubjectType.LAB else THEORY_WEIGHT
        weight = item.get("weight", default_weight)
        if not isinstance(weight, int) or isinstance(weight, bool) or weight <= 0:
            raise ValidationError(f"Subject {subject_id} weight must be a positive integer")

        subjects.append(
            Subject(
                subject_id=subject_id,
                name=str(item.get("name") or subject_id),
                subject_type=subject_type,
                weight=weight,
            )
        )

    slots: list[TimetableSlot] = []
    seen_slots: set[str] = set()
    for item in data.get("slots") or []:
        slot_id = str(_require(item, "id", "Slot"))
        if slot_id in seen_slots:
            raise ValidationError(f"Duplicate slot id: {slot_id}")
        seen_slots.add(slot_id)

        weekday = _require(item, "weekday", "Slot")
        if not isinstance(weekday, int) or isinstance(weekday, bool) or not 0 <= weekday <= 6:
            raise ValidationError(f"Slot {slot_id} weekday must be 0 (Sunday) to 6 (Saturday)")

        subject_id = str(_require(item, "subject_id", "Slot"))
        if subject_id not in seen_subjects:
            raise ValidationError(f"Slot {slot_id} references unknown subject {subject_id}")

        slots.append(
            TimetableSlot(
                slot_id=slot_id,
                weekday=weekday,
                subject_id=subject_id,
                start_time=_parse_time(_require(item, "start", "Slot"), "start"),
                end_time=_parse_time(_require(item, "end", "Slot"), "end"),
                display_name=item.get("display_name") or None,
            )
        )

    return TimetableCatalog(subjects=subjects, slots=slots)


def load_catalog_file(path: str | Path) -> TimetableCatalog:
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValidationError(f"Timetable file {path} is not valid JSON: {e}") from e
    if not isinstance(raw, dict):
        raise ValidationError(f"Timetable file {path} must contain a JSON object")
    return load_catalog(raw)


def catalog_to_dict(catalog: TimetableCatalog) -> dict:
    return {
        "subjects": [
            {
                "id": s.subject_id,
                "name": s.name,
                "type": s.subject_type.value,
                "weight": s.weight,
            }
            for s in catalog.subjects
        ],
        "slots": [
            {
                "id": s.slot_id,
                "weekday": s.weekday,
                "subject_id": s.subject_id,
                "start": s.start_time.strftime("%H:%M"),
                "end": s.end_time.strftime("%H:%M"),
                "display_name": s.display_name,
            }
            for s in catalog.slots
        ],
    }
