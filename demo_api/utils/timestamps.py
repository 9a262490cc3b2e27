"""Timestamp helpers."""

from datetime import datetime, timezone
from typing import Optional


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """
    Format a moment as an ISO-8601 UTC string with millisecond precision.

    Args:
        moment: Datetime to format; defaults to the current wall-clock time.
            Naive datetimes are taken to be UTC.

    Returns:
        Timestamp such as ``2024-01-01T00:00:00.000Z``
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
