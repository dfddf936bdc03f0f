from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Server clock in UTC, stored naive."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _as_naive_utc(moment: datetime) -> datetime:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.replace(tzinfo=None)


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Read a startDate/endDate query value.

    Blank means "no bound". Offsets (including a trailing Z) are folded into
    UTC; values without an offset are taken as UTC already. Raises ValueError
    on anything datetime.fromisoformat() refuses.
    """
    text = (value or "").strip()
    if not text:
        return None

    if text[-1] in "Zz":
        text = f"{text[:-1]}+00:00"

    return _as_naive_utc(datetime.fromisoformat(text))


def to_utc_z(dt: Optional[datetime]) -> Optional[str]:
    """Render a stored timestamp as e.g. 2025-01-01T10:00:00.123Z."""
    if dt is None:
        return None
    stamp = _as_naive_utc(dt).isoformat(timespec="milliseconds")
    return f"{stamp}Z"
