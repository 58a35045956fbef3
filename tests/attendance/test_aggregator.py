from __future__ import annotations

from datetime import date, time, timedelta

from src.classtrack.classtrack.attendance.aggregator import AttendanceAggregator
from src.classtrack.classtrack.attendance.model import AttendanceRecord, HolidayMarker
from src.classtrack.classtrack.common.datetime_utils import iter_dates, weekday_index
from src.classtrack.classtrack.core.enums import AttendanceStatus, SubjectType
from src.classtrack.classtrack.timetable.model import Subject, TimetableCatalog, TimetableSlot

PRESENT = AttendanceStatus.PRESENT
ABSENT = AttendanceStatus.ABSENT


def _record(slot_id: str, day: date, status: AttendanceStatus = PRESENT, owner: str = "u1") -> AttendanceRecord:
    return AttendanceRecord(
        record_id=f"{owner}_{day.isoformat()}_{slot_id}",
        owner_id=owner,
        timetable_slot_id=slot_id,
        date=day,
        status=status,
    )


def _mark_every_slot(catalog: TimetableCatalog, start: date, end: date, status=PRESENT) -> list[AttendanceRecord]:
    out = []
    for day in iter_dates(start, end):
        for slot in catalog.slots_for_weekday(weekday_index(day)):
            out.append(_record(slot.slot_id, day, status))
    return out


def test_all_past_classes_attended(two_slot_catalog, term_start):
    # Wed..Sat plus Monday: five class days, two slots each
    today = date(2025, 12, 16)
    records = _mark_every_slot(two_slot_catalog, term_start, today)

    agg = AttendanceAggregator(two_slot_catalog, term_start).aggregate(records, [], today)

    assert agg.grand_total == 10
    assert agg.grand_attended == 10
    assert agg.per_subject["MATH"].total == 5
    assert agg.per_subject["PHY"].attended == 5


def test_unmarked_past_slots_count_as_absent(two_slot_catalog, term_start, fixed_today):
    records = [_record("d3_a", term_start)]

    agg = AttendanceAggregator(two_slot_catalog, term_start).aggregate(records, [], fixed_today)

    assert agg.grand_total == 6
    assert agg.grand_attended == 1


def test_unmarked_today_contributes_nothing(two_slot_catalog, term_start, fixed_today):
    records = _mark_every_slot(two_slot_catalog, term_start, fixed_today)
    svc = AttendanceAggregator(two_slot_catalog, term_start)

    agg = svc.aggregate(records, [], fixed_today)
    assert (agg.grand_total, agg.grand_attended) == (6, 6)

    # the same data one day later turns the unmarked Saturday into a deficit
    agg = svc.aggregate(records, [], fixed_today + timedelta(days=1))
    assert (agg.grand_total, agg.grand_attended) == (8, 6)


def test_marked_today_counts_present_and_absent(two_slot_catalog, term_start, fixed_today):
    records = _mark_every_slot(two_slot_catalog, term_start, fixed_today)
    records.append(_record("d6_a", fixed_today, PRESENT))
    records.append(_record("d6_b", fixed_today, ABSENT))

    agg = AttendanceAggregator(two_slot_catalog, term_start).aggregate(records, [], fixed_today)

    assert agg.grand_total == 8
    assert agg.grand_attended == 7


def test_holiday_removes_every_slot_of_the_day(two_slot_catalog, term_start, fixed_today):
    records = _mark_every_slot(two_slot_catalog, term_start, fixed_today)
    holidays = [HolidayMarker(holiday_id="h1", owner_id="u1", date=date(2025, 12, 11))]

    agg = AttendanceAggregator(two_slot_catalog, term_start).aggregate(records, holidays, fixed_today)

    assert agg.grand_total == 4
    assert agg.grand_attended == 4


def test_holiday_on_day_without_classes_is_noop(two_slot_catalog, term_start):
    today = date(2025, 12, 16)
    holidays = [HolidayMarker(holiday_id="h1", owner_id="u1", date=date(2025, 12, 14))]
    svc = AttendanceAggregator(two_slot_catalog, term_start)

    assert svc.aggregate([], holidays, today) == svc.aggregate([], [], today)


def test_future_holiday_ignores_records(two_slot_catalog, term_start, fixed_today):
    records = [_record("d6_a", fixed_today)]
    holidays = [HolidayMarker(holiday_id="h1", owner_id="u1", date=fixed_today)]

    agg = AttendanceAggregator(two_slot_catalog, term_start).aggregate(records, holidays, fixed_today)

    assert agg.grand_total == 6
    assert agg.grand_attended == 0


def test_term_start_is_inclusive_and_day_before_is_excluded(two_slot_catalog, term_start):
    day_before = term_start - timedelta(days=1)
    records = [_record("d2_a", day_before), _record("d3_a", term_start)]

    agg = AttendanceAggregator(two_slot_catalog, term_start).aggregate(records, [], term_start + timedelta(days=1))

    assert agg.grand_total == 2
    assert agg.grand_attended == 1


def test_last_record_for_a_slot_wins(two_slot_catalog, term_start):
    today = term_start + timedelta(days=1)
    first = [_record("d3_a", term_start, PRESENT), _record("d3_a", term_start, ABSENT)]
    second = list(reversed(first))
    svc = AttendanceAggregator(two_slot_catalog, term_start)

    assert svc.aggregate(first, [], today).grand_attended == 0
    assert svc.aggregate(second, [], today).grand_attended == 1


def test_duplicate_records_for_today_count_once(two_slot_catalog, term_start, fixed_today):
    records = [_record("d6_a", fixed_today, ABSENT), _record("d6_a", fixed_today, PRESENT)]

    agg = AttendanceAggregator(two_slot_catalog, fixed_today).aggregate(records, [], fixed_today)

    assert agg.grand_total == 1
    assert agg.grand_attended == 1


def test_lab_slots_are_weighted(default_catalog):
    tuesday = date(2025, 12, 16)

    agg = AttendanceAggregator(default_catalog, tuesday).aggregate([], [], tuesday + timedelta(days=1))

    assert agg.grand_total == 7
    assert agg.per_subject["AI_ML_LAB"].total == 3
    assert agg.per_subject["OT"].total == 2
    assert agg.per_subject["FSD_LAB"].total == 0


def test_orphan_record_and_unknown_subject_are_skipped(term_start, fixed_today):
    subjects = [Subject(subject_id="MATH", name="Mathematics", subject_type=SubjectType.THEORY, weight=1)]
    slots = [
        TimetableSlot("sat_math", 6, "MATH", time(9, 0), time(10, 0)),
        TimetableSlot("sat_ghost", 6, "GHOST", time(10, 0), time(11, 0)),
    ]
    catalog = TimetableCatalog(subjects=subjects, slots=slots)
    records = [
        _record("sat_math", fixed_today),
        _record("sat_ghost", fixed_today),
        _record("no_such_slot", fixed_today),
    ]

    agg = AttendanceAggregator(catalog, term_start).aggregate(records, [], fixed_today)

    assert agg.grand_total == 1
    assert agg.grand_attended == 1
    assert set(agg.per_subject) == {"MATH"}


def test_weight_conservation_and_idempotence(default_catalog, term_start):
    today = date(2026, 1, 20)
    records = _mark_every_slot(default_catalog, term_start, date(2026, 1, 5))
    records += _mark_every_slot(default_catalog, date(2026, 1, 5), today, ABSENT)[::2]
    holidays = [
        HolidayMarker(holiday_id="h1", owner_id="u1", date=date(2025, 12, 25)),
        HolidayMarker(holiday_id="h2", owner_id="u1", date=date(2026, 1, 1)),
    ]
    svc = AttendanceAggregator(default_catalog, term_start)

    first = svc.aggregate(records, holidays, today)
    second = svc.aggregate(records, holidays, today)

    assert first == second
    assert first.grand_total == sum(t.total for t in first.per_subject.values())
    assert first.grand_attended == sum(t.attended for t in first.per_subject.values())
    assert 0 < first.grand_attended < first.grand_total
