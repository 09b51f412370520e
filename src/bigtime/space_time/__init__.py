"""Calendars, Julian Dates and timescales."""
