"""Configuration overrides read from the environment.

Overrides are never cached: a ``TimescaleConfig`` is a snapshot taken by the
caller, and when none is supplied one is read from ``os.environ`` at the
moment it is needed.
"""

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Mapping, Optional

from .constants import (
    DEFAULT_DIVISION_PRECISION,
    ENV_DIVISION_PRECISION,
    ENV_UT1_MINUS_TAI,
    ENV_UT1_TABLE,
    ENV_UTC_MINUS_TAI,
)


class ConfigurationError(ValueError):
    """Raised when a configuration override cannot be parsed."""

    def __init__(self, name: str, value: str, expected: str):
        super().__init__(f"{name}={value!r} is not valid: expected {expected}")
        self.name = name
        self.value = value


def _read(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(name)
    if value is None or value.strip() == "":
        return None
    return value.strip()


def parse_integer_seconds(name: str, value: str) -> Decimal:
    """Parse an override that must be a whole number of seconds.

    Args:
        name: Name of the setting, used in the error message
        value: Raw text of the override

    Returns:
        The value as an integral Decimal

    Raises:
        ConfigurationError: If the text is not a plain integer ("0.0" is rejected)
    """
    try:
        return Decimal(int(value, 10))
    except ValueError:
        raise ConfigurationError(name, value, "an integer number of seconds") from None


def parse_decimal_seconds(name: str, value: str) -> Decimal:
    """Parse an override that may be any finite decimal number of seconds."""
    try:
        parsed = Decimal(value)
    except InvalidOperation:
        raise ConfigurationError(name, value, "a decimal number of seconds") from None
    if not parsed.is_finite():
        raise ConfigurationError(name, value, "a finite decimal number of seconds")
    return parsed


def _as_decimal(name: str, value, expected: str) -> Decimal:
    try:
        parsed = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ConfigurationError(name, str(value), expected) from None
    if not parsed.is_finite():
        raise ConfigurationError(name, str(value), expected)
    return parsed


def division_precision(environ: Optional[Mapping[str, str]] = None) -> int:
    """Digit count used for divisions whose result does not terminate.

    Args:
        environ: Mapping to read from, defaults to ``os.environ``

    Returns:
        Number of significant digits, 34 unless overridden

    Raises:
        ConfigurationError: If the override is not a positive integer
    """
    environ = os.environ if environ is None else environ
    raw = _read(environ, ENV_DIVISION_PRECISION)
    if raw is None:
        return DEFAULT_DIVISION_PRECISION
    try:
        digits = int(raw, 10)
    except ValueError:
        digits = 0
    if digits < 1:
        raise ConfigurationError(ENV_DIVISION_PRECISION, raw, "a positive integer")
    return digits


@dataclass(frozen=True)
class TimescaleConfig:
    """Offsets and data locations that override the built-in timescale models.

    Attributes:
        utc_minus_tai: Fixed UTC-TAI in whole seconds, replacing the default -37
        ut1_minus_tai: Fixed UT1-TAI in seconds, replacing the table lookup
        ut1_table_path: UT1-TAI table to load instead of the packaged excerpt
    """

    utc_minus_tai: Optional[Decimal] = None
    ut1_minus_tai: Optional[Decimal] = None
    ut1_table_path: Optional[Path] = None

    def __post_init__(self):
        if self.utc_minus_tai is not None:
            utc = _as_decimal(
                "utc_minus_tai", self.utc_minus_tai, "an integer number of seconds"
            )
            if utc != utc.to_integral_value():
                raise ConfigurationError("utc_minus_tai", str(utc), "an integer number of seconds")
            object.__setattr__(self, "utc_minus_tai", utc)
        if self.ut1_minus_tai is not None:
            ut1 = _as_decimal(
                "ut1_minus_tai", self.ut1_minus_tai, "a finite decimal number of seconds"
            )
            object.__setattr__(self, "ut1_minus_tai", ut1)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TimescaleConfig":
        """Build a config from environment variables.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``

        Returns:
            A validated TimescaleConfig

        Raises:
            ConfigurationError: If any override is malformed
        """
        environ = os.environ if environ is None else environ

        utc = _read(environ, ENV_UTC_MINUS_TAI)
        ut1 = _read(environ, ENV_UT1_MINUS_TAI)
        table = _read(environ, ENV_UT1_TABLE)

        return cls(
            utc_minus_tai=parse_integer_seconds(ENV_UTC_MINUS_TAI, utc) if utc else None,
            ut1_minus_tai=parse_decimal_seconds(ENV_UT1_MINUS_TAI, ut1) if ut1 else None,
            ut1_table_path=Path(table) if table else None,
        )
