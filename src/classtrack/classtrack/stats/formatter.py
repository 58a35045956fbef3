from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction

from ..attendance.aggregator import AggregateResult
from ..core.constants import DANGER_PERCENTAGE, MIN_ATTENDANCE_RATIO, SAFE_PERCENTAGE
from ..core.enums import SafetyStatus
from ..timetable.model import TimetableCatalog


@dataclass(frozen=True)
class OverallStats:
    total_classes: int
    attended_classes: int
    percentage: float
    status: SafetyStatus
    bunks_available: int


@dataclass(frozen=True)
class SubjectStats:
    subject_id: str
    subject_name: str
    total_classes: int
    attended_classes: int
    percentage: float


@dataclass(frozen=True)
class StatsReport:
    overall: OverallStats
    by_subject: list[SubjectStats]


def percentage(attended: int, total: int) -> float:
    """Attendance percentage rounded half-up to one decimal; 100 when nothing was held."""
    if total == 0:
        return 100.0
    raw = Decimal(100 * attended) / Decimal(total)
    return float(raw.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def classify(pct: float) -> SafetyStatus:
    if pct < DANGER_PERCENTAGE:
        return SafetyStatus.DANGER
    if pct < SAFE_PERCENTAGE:
        return SafetyStatus.WARNING
    return SafetyStatus.SAFE


def bunks_available(attended: int, total: int, pct: float) -> int:
    """Weighted units that can still be missed keeping attended/total >= 0.75.

    Below the threshold there is no margin at all.
    """
    if pct < SAFE_PERCENTAGE:
        return 0
    margin = math.floor(Fraction(attended) / MIN_ATTENDANCE_RATIO - total)
    return max(0, margin)


class StatsFormatter:
    def __init__(self, catalog: TimetableCatalog):
        self._catalog = catalog

    def format(self, agg: AggregateResult) -> StatsReport:
        pct = percentage(agg.grand_attended, agg.grand_total)
        overall = OverallStats(
            total_classes=agg.grand_total,
            attended_classes=agg.grand_attended,
            percentage=pct,
            status=classify(pct),
            bunks_available=bunks_available(agg.grand_attended, agg.grand_total, pct),
        )

        by_subject: list[SubjectStats] = []
        for subject_id, tally in agg.per_subject.items():
            subject = self._catalog.subject(subject_id)
            by_subject.append(
                SubjectStats(
                    subject_id=subject_id,
                    subject_name=subject.name if subject else subject_id,
                    total_classes=tally.total,
                    attended_classes=tally.attended,
                    percentage=percentage(tally.attended, tally.total),
                )
            )

        return StatsReport(overall=overall, by_subject=by_subject)
