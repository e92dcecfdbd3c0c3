"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Daily reconciliation
BREAK_THRESHOLD_MINUTES = 4 * 60
DEDUCTED_BREAK_MINUTES = 60

# Payroll
OVERTIME_RATE_MULTIPLIER = 1.5

# Service-charge distribution
GHOST_COUNT = 2
GHOST_MINUTES_EACH = 12 * 60
PAYOUT_RATE = 0.6
WITHHOLD_RATE = 0.4
EXTRA_DEDUCTION_MINUTES = 60
