import os

from .config import HOLIDAYS, TIMESHEET_SETTINGS

TIMESHEET_SETTINGS = {**TIMESHEET_SETTINGS, "companyName": TIMESHEET_SETTINGS["companyName"] or "KV Dental"}
HOLIDAYS = list(HOLIDAYS)

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
