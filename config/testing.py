# Fixed values: tests must not depend on the environment
TIMESHEET_SETTINGS = {
    "companyName": "Test Co",
    "payPeriodStartDate": "2024-01-01",
    "payPeriodLength": 14,
    "maxDailyHours": 15,
    "maxWeeklyHours": 50,
    "minLunchDuration": 30,
    "maxLunchDuration": 60,
    "minStartTime": 420,
    "maxEndTime": 1200,
    "overtimeThreshold": 8,
    "doubleTimeThreshold": 12,
    "holidayHoursDefault": 8,
    "holidayPayMultiplier": 1.5,
    "allowFutureTimeEntry": False,
    "allowPastTimeEntry": True,
    "pastTimeEntryLimit": 14,
}

HOLIDAYS = [
    {"date": "2024-01-01", "name": "New Year's Day"},
    {"date": "2024-02-19", "name": "Family Day", "payRate": 2},
]

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
