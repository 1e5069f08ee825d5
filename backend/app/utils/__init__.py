"""Utility functions and helpers."""

from app.utils.datetime_utils import to_api_timezone, to_utc, utc_now

__all__ = [
    "to_api_timezone",
    "to_utc",
    "utc_now",
]
