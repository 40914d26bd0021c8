# tasks/timestamps.py

"""
Timestamp codec.

The store only ever holds aware UTC datetimes; text forms exist only at the
load/export boundary and go through this module.

Output format mirrors JavaScript's Date.toISOString() ("...T10:30:00.000Z")
whenever the value fits in milliseconds. Values with sub-millisecond parts
are written with microseconds so nothing is lost on a round trip.
"""

from __future__ import annotations

from datetime import datetime, timezone


def _as_utc(dt: datetime) -> datetime:
    # Naive values are taken to be UTC.
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utc_now() -> datetime:
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond - now.microsecond % 1000)


def format_timestamp(dt: datetime) -> str:
    dt = _as_utc(dt)
    timespec = "milliseconds" if dt.microsecond % 1000 == 0 else "microseconds"
    return dt.replace(tzinfo=None).isoformat(timespec=timespec) + "Z"


def parse_timestamp(raw: object) -> datetime:
    if not isinstance(raw, str):
        raise ValueError(f"timestamp must be a string, got {type(raw).__name__}")
    text = raw.strip()
    if not text:
        raise ValueError("timestamp is empty")
    if text[-1] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    try:
        return _as_utc(parsed)
    except OverflowError as e:
        # Representable with its offset but not once shifted to UTC.
        raise ValueError(f"timestamp out of range: {raw!r}") from e
