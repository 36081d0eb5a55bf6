import os

SNAPSHOT_PATH = os.getenv("SNAPSHOT_PATH", "tests/data/snapshot.json")

SEMESTER_FEE = "200000"

DEFAULT_PERIOD = "2025-1"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
