import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Early check-ins are metered from (planned start - grace)
EARLY_GRACE_MINUTES = int(os.getenv("EARLY_GRACE_MINUTES", "20"))

# Informational schedule limits (hours)
SCHEDULE_LIMITS = {
    "daily_hours": float(os.getenv("DAILY_HOURS_LIMIT", "10")),
    "daily_hours_with_lunch": float(os.getenv("DAILY_HOURS_LIMIT_WITH_LUNCH", "11")),
    "weekly_base_hours": float(os.getenv("WEEKLY_BASE_HOURS_LIMIT", "44")),
    "weekly_extra_hours": float(os.getenv("WEEKLY_EXTRA_HOURS_LIMIT", "12")),
    "weekly_total_hours": float(os.getenv("WEEKLY_TOTAL_HOURS_LIMIT", "56")),
}
