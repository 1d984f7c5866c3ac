import os

from .config import HOLIDAYS, TIMESHEET_SETTINGS

TIMESHEET_SETTINGS = dict(TIMESHEET_SETTINGS)
# Holidays normally come from the settings store; the built-in calendar is opt-in
HOLIDAYS = list(HOLIDAYS) if bool(int(os.getenv("USE_DEFAULT_HOLIDAYS", "1"))) else []

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
