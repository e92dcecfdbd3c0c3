import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SERVICE_CHARGE_PAYOUT_RATE = float(os.getenv("SERVICE_CHARGE_PAYOUT_RATE", "0.6"))
SERVICE_CHARGE_GHOST_COUNT = int(os.getenv("SERVICE_CHARGE_GHOST_COUNT", "2"))
SERVICE_CHARGE_GHOST_MINUTES = int(os.getenv("SERVICE_CHARGE_GHOST_MINUTES", "720"))
SERVICE_CHARGE_EXTRA_DEDUCTION_MINUTES = int(os.getenv("SERVICE_CHARGE_EXTRA_DEDUCTION_MINUTES", "60"))

OVERTIME_RATE_MULTIPLIER = float(os.getenv("OVERTIME_RATE_MULTIPLIER", "1.5"))
