"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_SESSION_DAYS = 7

DEFAULT_WORKING_DAYS = 22
DEFAULT_PF_PERCENT = Decimal("12.00")
DEFAULT_PROFESSIONAL_TAX = 200

DEFAULT_ANNUAL_LEAVE = 12
DEFAULT_SICK_LEAVE = 6

DEFAULT_PASSWORD_LENGTH = 10
MIN_PASSWORD_LENGTH = 6
