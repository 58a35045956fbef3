from __future__ import annotations

from datetime import date, time

import pytest

from src.classtrack.classtrack.core.enums import SubjectType
from src.classtrack.classtrack.timetable.catalog import build_default_catalog
from src.classtrack.classtrack.timetable.model import Subject, TimetableCatalog, TimetableSlot


@pytest.fixture
def term_start() -> date:
    # Wednesday
    return date(2025, 12, 10)


@pytest.fixture
def fixed_today() -> date:
    # Saturday
    return date(2025, 12, 13)


@pytest.fixture
def default_catalog() -> TimetableCatalog:
    return build_default_catalog()


@pytest.fixture
def two_slot_catalog() -> TimetableCatalog:
    """Two weight-1 theory classes every day Monday to Saturday.

    Slot ids are `d<weekday>_a` and `d<weekday>_b`.
    """
    subjects = [
        Subject(subject_id="MATH", name="Mathematics", subject_type=SubjectType.THEORY, weight=1),
        Subject(subject_id="PHY", name="Physics", subject_type=SubjectType.THEORY, weight=1),
    ]
    slots = []
    for weekday in range(1, 7):
        slots.append(TimetableSlot(f"d{weekday}_a", weekday, "MATH", time(9, 0), time(10, 0)))
        slots.append(TimetableSlot(f"d{weekday}_b", weekday, "PHY", time(10, 0), time(11, 0)))
    return TimetableCatalog(subjects=subjects, slots=slots)
