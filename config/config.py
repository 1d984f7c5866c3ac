import os


class Config:
    COMPANY_NAME = os.environ.get("COMPANY_NAME", "")

    # Kỳ lương (pay period)
    PAY_PERIOD_START_DATE = os.environ.get("PAY_PERIOD_START_DATE", "2024-01-01")
    PAY_PERIOD_LENGTH = os.environ.get("PAY_PERIOD_LENGTH", "14")

    # Giới hạn nhập giờ
    MAX_DAILY_HOURS = os.environ.get("MAX_DAILY_HOURS", "15")
    MAX_WEEKLY_HOURS = os.environ.get("MAX_WEEKLY_HOURS", "50")
    MIN_LUNCH_DURATION = os.environ.get("MIN_LUNCH_DURATION", "30")
    MAX_LUNCH_DURATION = os.environ.get("MAX_LUNCH_DURATION", "60")
    MIN_START_TIME = os.environ.get("MIN_START_TIME", "420")  # 7:00 AM
    MAX_END_TIME = os.environ.get("MAX_END_TIME", "1200")  # 8:00 PM

    # Tăng ca
    OVERTIME_THRESHOLD = os.environ.get("OVERTIME_THRESHOLD", "8")
    DOUBLE_TIME_THRESHOLD = os.environ.get("DOUBLE_TIME_THRESHOLD", "12")
    WEEKLY_OVERTIME_THRESHOLD = os.environ.get("WEEKLY_OVERTIME_THRESHOLD")
    WEEKLY_DOUBLE_TIME_THRESHOLD = os.environ.get("WEEKLY_DOUBLE_TIME_THRESHOLD")

    # Ngày lễ / nghỉ phép
    HOLIDAY_HOURS_DEFAULT = os.environ.get("HOLIDAY_HOURS_DEFAULT", "8")
    HOLIDAY_PAY_MULTIPLIER = os.environ.get("HOLIDAY_PAY_MULTIPLIER", "1.5")

    ALLOW_FUTURE_TIME_ENTRY = os.environ.get("ALLOW_FUTURE_TIME_ENTRY", "0")
    ALLOW_PAST_TIME_ENTRY = os.environ.get("ALLOW_PAST_TIME_ENTRY", "1")
    PAST_TIME_ENTRY_LIMIT = os.environ.get("PAST_TIME_ENTRY_LIMIT", "14")


# Same shape as the settings store (camelCase keys)
TIMESHEET_SETTINGS = {
    "companyName": Config.COMPANY_NAME,
    "payPeriodStartDate": Config.PAY_PERIOD_START_DATE,
    "payPeriodLength": Config.PAY_PERIOD_LENGTH,
    "maxDailyHours": Config.MAX_DAILY_HOURS,
    "maxWeeklyHours": Config.MAX_WEEKLY_HOURS,
    "minLunchDuration": Config.MIN_LUNCH_DURATION,
    "maxLunchDuration": Config.MAX_LUNCH_DURATION,
    "minStartTime": Config.MIN_START_TIME,
    "maxEndTime": Config.MAX_END_TIME,
    "overtimeThreshold": Config.OVERTIME_THRESHOLD,
    "doubleTimeThreshold": Config.DOUBLE_TIME_THRESHOLD,
    "weeklyOvertimeThreshold": Config.WEEKLY_OVERTIME_THRESHOLD,
    "weeklyDoubleTimeThreshold": Config.WEEKLY_DOUBLE_TIME_THRESHOLD,
    "holidayHoursDefault": Config.HOLIDAY_HOURS_DEFAULT,
    "holidayPayMultiplier": Config.HOLIDAY_PAY_MULTIPLIER,
    "allowFutureTimeEntry": Config.ALLOW_FUTURE_TIME_ENTRY,
    "allowPastTimeEntry": Config.ALLOW_PAST_TIME_ENTRY,
    "pastTimeEntryLimit": Config.PAST_TIME_ENTRY_LIMIT,
}

HOLIDAYS = [
    {"date": "2024-01-01", "name": "New Year's Day"},
    {"date": "2024-02-19", "name": "Family Day"},
    {"date": "2024-03-29", "name": "Good Friday"},
    {"date": "2024-05-20", "name": "Victoria Day"},
    {"date": "2024-07-01", "name": "Canada Day"},
    {"date": "2024-08-05", "name": "Civic Holiday"},
    {"date": "2024-09-02", "name": "Labour Day"},
    {"date": "2024-10-14", "name": "Thanksgiving"},
    {"date": "2024-12-25", "name": "Christmas Day"},
    {"date": "2024-12-26", "name": "Boxing Day"},
]

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
DEBUG = bool(int(os.environ.get("DEBUG", "1")))
