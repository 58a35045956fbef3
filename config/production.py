import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

TERM_START_DATE = os.getenv("TERM_START_DATE", "2025-12-10")

TIMETABLE_FILE = os.getenv("TIMETABLE_FILE") or None

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
