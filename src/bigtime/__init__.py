"""bigtime: exact calendar, Julian Date and timescale conversions."""

__version__ = "0.1.0"
