SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

EARLY_GRACE_MINUTES = 20

SCHEDULE_LIMITS = {}
