SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SERVICE_CHARGE_PAYOUT_RATE = 0.6
SERVICE_CHARGE_GHOST_COUNT = 2
SERVICE_CHARGE_GHOST_MINUTES = 720
SERVICE_CHARGE_EXTRA_DEDUCTION_MINUTES = 60

OVERTIME_RATE_MULTIPLIER = 1.5
