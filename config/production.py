import os

SNAPSHOT_PATH = os.getenv("SNAPSHOT_PATH", "/data/snapshot.json")

SEMESTER_FEE = os.getenv("SEMESTER_FEE", "200000")

DEFAULT_PERIOD = os.getenv("DEFAULT_PERIOD", "2025-1")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
