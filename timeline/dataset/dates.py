# timeline/dataset/dates.py
"""
Date strings in the dataset are "YYYY-MM-DD HH:MM" and are read as UTC.
"""

from __future__ import annotations
from datetime import datetime, timezone

from ..core.errors import DatasetError

DATETIME_FORMAT = '%Y-%m-%d %H:%M'


def datetime_string_to_timestamp(value: str) -> int:
    """'2019-03-01 14:05' -> epoch milliseconds. A 'T' separator is accepted too."""
    text = value.strip().replace('T', ' ')[:16]
    try:
        parsed = datetime.strptime(text, DATETIME_FORMAT)
    except ValueError as e:
        raise DatasetError(f"invalid date-time string: {value!r}") from e
    return int(parsed.replace(tzinfo=timezone.utc).timestamp() * 1000)


def datetime_string_to_date_string(value: str) -> str:
    # "YYYY-MM-DD"
    return value[:10]


def timestamp_to_datetime_string(timestamp: float) -> str:
    return datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc).strftime(DATETIME_FORMAT)
