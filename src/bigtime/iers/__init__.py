"""Retrieval of Earth orientation data."""

from .client import Ut1FetchError, Ut1TableClient

__all__ = ["Ut1FetchError", "Ut1TableClient"]
