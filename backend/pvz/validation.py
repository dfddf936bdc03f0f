from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from pvz.time_utils import parse_iso_datetime


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 30

MIN_PASSWORD_LENGTH = 6

# Query integers longer than this are rejected before int() sees them
MAX_INT_DIGITS = 32

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ValidationError(ValueError):
    """400-level input problem."""


class ConflictError(ValueError):
    """Business rule conflict (e.g., reception already open)."""


class NotFoundError(LookupError):
    """Referenced entity does not exist."""


@dataclass(frozen=True)
class PVZListQuery:
    """Parsed query string of GET /pvz."""
    start_date: datetime | None = None
    end_date: datetime | None = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT


def parse_uuid(value: Any, field: str = "id") -> str:
    """Return the canonical string form of a UUID or raise ValidationError."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} must be a valid UUID")
    try:
        return str(uuid.UUID(value.strip()))
    except ValueError:
        raise ValidationError(f"{field} must be a valid UUID")


def parse_choice(value: Any, choices: tuple[str, ...], field: str) -> str:
    if not isinstance(value, str) or value not in choices:
        raise ValidationError(f"{field} must be one of: {', '.join(choices)}")
    return value


def validate_email(email: Any) -> str:
    if not isinstance(email, str) or not _EMAIL_RE.match(email.strip()):
        raise ValidationError("email must be a valid email address")
    return email.strip().lower()


def _parse_int(raw: str | None, field: str, default: int) -> int:
    if raw is None or raw == "":
        return default
    stripped = raw.strip()
    # Reject decimals and scientific notation, plain digits only
    if not re.fullmatch(r"-?\d+", stripped):
        raise ValidationError(f"{field} must be an integer")
    if len(stripped.lstrip("-")) > MAX_INT_DIGITS:
        raise ValidationError(f"{field} is too large")
    return int(stripped)


def _parse_date(raw: str | None, field: str) -> datetime | None:
    try:
        return parse_iso_datetime(raw)
    except ValueError:
        raise ValidationError(f"{field} must be an ISO-8601 datetime")


def parse_pagination(args: Mapping[str, str]) -> PVZListQuery:
    """
    Validate the GET /pvz query string.

    page >= 1, 1 <= limit <= MAX_LIMIT; startDate/endDate are optional
    ISO-8601 datetimes and, when both are given, startDate <= endDate.
    """
    page = _parse_int(args.get("page"), "page", DEFAULT_PAGE)
    limit = _parse_int(args.get("limit"), "limit", DEFAULT_LIMIT)

    if page < 1:
        raise ValidationError("page must be >= 1")
    if limit < 1 or limit > MAX_LIMIT:
        raise ValidationError(f"limit must be between 1 and {MAX_LIMIT}")

    start_date = _parse_date(args.get("startDate"), "startDate")
    end_date = _parse_date(args.get("endDate"), "endDate")

    if start_date and end_date and start_date > end_date:
        raise ValidationError("startDate must not be after endDate")

    return PVZListQuery(start_date=start_date, end_date=end_date, page=page, limit=limit)
