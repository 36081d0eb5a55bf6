import os

# JSON export of the document collections (students, grades, attendance, ...)
SNAPSHOT_PATH = os.getenv("SNAPSHOT_PATH", "data/snapshot.json")

# Semester fee in COP before the student's discount
SEMESTER_FEE = os.getenv("SEMESTER_FEE", "200000")

DEFAULT_PERIOD = os.getenv("DEFAULT_PERIOD", "2025-1")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
