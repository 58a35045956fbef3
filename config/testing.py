SECRET_KEY = "test-secret"

TERM_START_DATE = "2025-12-10"

TIMETABLE_FILE = None

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
