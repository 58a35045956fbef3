from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from ..core.enums import SubjectType


@dataclass(frozen=True)
class Subject:
    """Course taught in the term; `weight` scales every scheduled slot."""

    subject_id: str
    name: str
    subject_type: SubjectType
    weight: int


@dataclass(frozen=True)
class TimetableSlot:
    """One recurring class period on a weekday (0 = Sunday ... 6 = Saturday)."""

    slot_id: str
    weekday: int
    subject_id: str
    start_time: time
    end_time: time
    display_name: Optional[str] = None


@dataclass(frozen=True)
class TimetableCatalog:
    """Immutable weekly timetable plus the subject catalog it references.

    Built once at startup and passed by reference into the engine.
    """

    subjects: Sequence[Subject]
    slots: Sequence[TimetableSlot]
    _subjects_by_id: Mapping[str, Subject] = field(init=False, repr=False, compare=False)
    _slots_by_id: Mapping[str, TimetableSlot] = field(init=False, repr=False, compare=False)
    _slots_by_weekday: Mapping[int, tuple[TimetableSlot, ...]] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        subjects = tuple(self.subjects)
        slots = tuple(self.slots)

        by_weekday: dict[int, list[TimetableSlot]] = {}
        for s in slots:
            by_weekday.setdefault(s.weekday, []).append(s)

        object.__setattr__(self, "subjects", subjects)
        object.__setattr__(self, "slots", slots)
        object.__setattr__(self, "_subjects_by_id", MappingProxyType({s.subject_id: s for s in subjects}))
        object.__setattr__(self, "_slots_by_id", MappingProxyType({s.slot_id: s for s in slots}))
        object.__setattr__(
            self,
            "_slots_by_weekday",
            MappingProxyType({day: tuple(items) for day, items in by_weekday.items()}),
        )

    def subject(self, subject_id: str) -> Optional[Subject]:
        return self._subjects_by_id.get(subject_id)

    def slot(self, slot_id: str) -> Optional[TimetableSlot]:
        return self._slots_by_id.get(slot_id)

    def slots_for_weekday(self, weekday: int) -> tuple[TimetableSlot, ...]:
        return self._slots_by_weekday.get(weekday, ())

    def has_classes_on(self, weekday: int) -> bool:
        return bool(self.slots_for_weekday(weekday))
