import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Service-charge distribution
SERVICE_CHARGE_PAYOUT_RATE = float(os.getenv("SERVICE_CHARGE_PAYOUT_RATE", "0.6"))
SERVICE_CHARGE_GHOST_COUNT = int(os.getenv("SERVICE_CHARGE_GHOST_COUNT", "2"))
SERVICE_CHARGE_GHOST_MINUTES = int(os.getenv("SERVICE_CHARGE_GHOST_MINUTES", "720"))
SERVICE_CHARGE_EXTRA_DEDUCTION_MINUTES = int(os.getenv("SERVICE_CHARGE_EXTRA_DEDUCTION_MINUTES", "60"))

# Payroll
OVERTIME_RATE_MULTIPLIER = float(os.getenv("OVERTIME_RATE_MULTIPLIER", "1.5"))
