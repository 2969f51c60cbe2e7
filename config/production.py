import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

EARLY_GRACE_MINUTES = int(os.getenv("EARLY_GRACE_MINUTES", "20"))

SCHEDULE_LIMITS = {
    "daily_hours": float(os.getenv("DAILY_HOURS_LIMIT", "10")),
    "daily_hours_with_lunch": float(os.getenv("DAILY_HOURS_LIMIT_WITH_LUNCH", "11")),
    "weekly_base_hours": float(os.getenv("WEEKLY_BASE_HOURS_LIMIT", "44")),
    "weekly_extra_hours": float(os.getenv("WEEKLY_EXTRA_HOURS_LIMIT", "12")),
    "weekly_total_hours": float(os.getenv("WEEKLY_TOTAL_HOURS_LIMIT", "56")),
}
