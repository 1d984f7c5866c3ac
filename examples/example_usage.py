"""Example: compute a pay period through the service layer (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib
from datetime import date, time

from config import get_settings_module

from src.timesheet_engine.timesheet_engine.container import build_container
from src.timesheet_engine.timesheet_engine.core.enums import DayType
from src.timesheet_engine.timesheet_engine.entries.model import TimeEntry
from src.timesheet_engine.timesheet_engine.policy.loader import policy_from_settings


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(policy=policy_from_settings(settings))

    workday = TimeEntry(
        start_time=time(8, 0),
        end_time=time(17, 0),
        lunch_start_time=time(12, 0),
        lunch_end_time=time(12, 30),
    )
    week_one = [TimeEntry(day_type=DayType.HOLIDAY)] + [workday] * 4
    week_two = [workday] * 4 + [TimeEntry(day_type=DayType.VACATION)]

    report = container.timesheet_service.compute(date(2024, 1, 1), [week_one, week_two])
    if report.ok:
        print("total:", report.period.total_hours, "vacation:", report.period.vacation_hours)
    else:
        for issue in report.issues:
            print(issue.to_dict())


if __name__ == "__main__":
    main()
