import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# First day of the term (YYYY-MM-DD); earlier dates are never counted
TERM_START_DATE = os.getenv("TERM_START_DATE", "2025-12-10")

# Optional JSON timetable; the built-in timetable is used when unset
TIMETABLE_FILE = os.getenv("TIMETABLE_FILE") or None

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
