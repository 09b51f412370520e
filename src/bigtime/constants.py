from decimal import Decimal

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
MONTHS_PER_YEAR = 12
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR
SECONDS_PER_DAY = SECONDS_PER_HOUR * HOURS_PER_DAY

# Julian Date at 2000-01-01 12:00 TT
J2000 = Decimal("2451545.0")
MODIFIED_JD_ORIGIN = Decimal("2400000.5")
JULIAN_CENTURY_DAYS = 36525

# Digits kept when a division does not terminate (IEEE 754 decimal128)
DEFAULT_DIVISION_PRECISION = 34
# Decimal places kept for UT1-TAI offsets, in seconds
UT1_PLACES = 7

# Environment variables
ENV_LOG_LEVEL = "BIGTIME_LOG_LEVEL"
ENV_DIVISION_PRECISION = "BIGTIME_DECIMAL_DIVISION_PRECISION"
ENV_UTC_MINUS_TAI = "BIGTIME_UTC_MINUS_TAI"
ENV_UT1_MINUS_TAI = "BIGTIME_UT1_MINUS_TAI"
ENV_UT1_TABLE = "BIGTIME_UT1_TABLE"
