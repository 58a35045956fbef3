"""Constants and defaults.

Note: Keep policy thresholds here to avoid magic numbers spread across code.
"""

from fractions import Fraction

MIN_ATTENDANCE_RATIO = Fraction(3, 4)
SAFE_PERCENTAGE = 75
DANGER_PERCENTAGE = 65

THEORY_WEIGHT = 1
LAB_WEIGHT = 3

DEFAULT_TERM_START = "2025-12-10"

SUNDAY = 0
