"""
Timestamp helpers shared by the table models.

Timestamps are timezone-aware UTC; columns are declared with
``DateTime(timezone=True)``.
"""

import datetime

from sqlalchemy import DateTime


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def timestamp_type() -> DateTime:
    return DateTime(timezone=True)
