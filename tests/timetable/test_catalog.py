from __future__ import annotations

import json
from datetime import time

import pytest

from src.classtrack.classtrack.core.enums import SubjectType
from src.classtrack.classtrack.core.exceptions import ValidationError
from src.classtrack.classtrack.timetable.catalog import catalog_to_dict, load_catalog, load_catalog_file


def _minimal() -> dict:
    return {
        "subjects": [
            {"id": "MATH", "name": "Mathematics", "type": "THEORY", "weight": 1},
            {"id": "CHEM_LAB", "name": "Chemistry Lab", "type": "LAB"},
        ],
        "slots": [
            {"id": "mon_1", "weekday": 1, "subject_id": "MATH", "start": "09:00", "end": "10:00"},
            {"id": "mon_2", "weekday": 1, "subject_id": "CHEM_LAB", "start": "10:00", "end": "12:30", "display_name": "Chem LAB"},
        ],
    }


def test_default_catalog_shape(default_catalog):
    assert len(default_catalog.subjects) == 11
    assert len(default_catalog.slots) == 36
    assert default_catalog.slots_for_weekday(0) == ()
    assert [s.slot_id for s in default_catalog.slots_for_weekday(5)] == ["fri_1", "fri_2", "fri_3", "fri_4", "fri_5"]
    assert default_catalog.subject("DBMS_LAB").weight == 3
    assert default_catalog.slot("thu_3").display_name == "P&S (CLC)"
    assert default_catalog.slot("nope") is None


def test_load_catalog_defaults_lab_weight():
    catalog = load_catalog(_minimal())

    lab = catalog.subject("CHEM_LAB")
    assert lab.subject_type == SubjectType.LAB
    assert lab.weight == 3
    assert catalog.slot("mon_2").end_time == time(12, 30)
    assert catalog.has_classes_on(1)
    assert not catalog.has_classes_on(2)


def test_catalog_dict_reloads_to_equal_catalog(default_catalog):
    assert load_catalog(catalog_to_dict(default_catalog)) == default_catalog


@pytest.mark.parametrize(
    "mutate",
    [
        lambda d: d["subjects"][0].update(weight=0),
        lambda d: d["subjects"][0].update(weight="1"),
        lambda d: d["subjects"][0].update(type="SEMINAR"),
        lambda d: d["subjects"].append({"id": "MATH", "name": "Again"}),
        lambda d: d["slots"][0].update(weekday=7),
        lambda d: d["slots"][0].update(subject_id="GHOST"),
        lambda d: d["slots"][0].update(start="9am"),
        lambda d: d["slots"][1].update(id="mon_1"),
        lambda d: d["slots"][0].pop("end"),
    ],
)
def test_load_catalog_rejects_bad_entries(mutate):
    data = _minimal()
    mutate(data)

    with pytest.raises(ValidationError):
        load_catalog(data)


def test_load_catalog_file(tmp_path):
    path = tmp_path / "timetable.json"
    path.write_text(json.dumps(_minimal()), encoding="utf-8")

    catalog = load_catalog_file(path)

    assert [s.subject_id for s in catalog.subjects] == ["MATH", "CHEM_LAB"]


def test_load_catalog_file_rejects_invalid_json(tmp_path):
    path = tmp_path / "timetable.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_catalog_file(path)


@pytest.mark.parametrize("section, entry", [("subjects", "MATH"), ("slots", 42)])
def test_load_catalog_rejects_non_object_entries(section, entry):
    data = _minimal()
    data[section].append(entry)

    with pytest.raises(ValidationError):
        load_catalog(data)
