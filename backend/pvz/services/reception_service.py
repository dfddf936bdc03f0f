"""
Reception Lifecycle Service

Goods are accepted at a pickup point inside a reception session.

DESIGN PRINCIPLES:
- One in_progress reception per pickup point at a time
- Receptions are immutable once closed
- A closed reception is never reopened; the next open creates a new row

CONCURRENCY:
- open: the pickup-point row is locked for the check-then-insert, and the
  partial unique index uq_receptions_one_open_per_pvz rejects whatever
  slips past (e.g. on SQLite, which ignores FOR UPDATE)
- close: conditional UPDATE ... WHERE status = 'in_progress'; zero rows
  affected means someone else closed it first
"""

from __future__ import annotations

from datetime import datetime

from ..extensions import db
from ..models import PickupPoint, Reception
from ..time_utils import utcnow
from ..validation import ConflictError
from .concurrency import commit_or_raise, compare_and_set, lock_for_update
from .pvz_service import PickupPointNotFoundError


class ReceptionError(ConflictError):
    """Raised for reception lifecycle rule violations."""
    pass


class ReceptionAlreadyOpenError(ReceptionError):
    pass


class NoOpenReceptionError(ReceptionError):
    pass


def _open_reception_query(pvz_id: str):
    return db.session.query(Reception).filter_by(
        pvz_id=pvz_id,
        status=Reception.STATUS_IN_PROGRESS,
    )


def open_reception(pvz_id: str) -> Reception:
    """
    Open a new reception on a pickup point.

    Raises:
        PickupPointNotFoundError: unknown pickup point
        ReceptionAlreadyOpenError: an in_progress reception exists
    """
    # Serializes concurrent opens on the same pickup point
    pickup_point = lock_for_update(
        db.session.query(PickupPoint).filter_by(id=pvz_id)
    ).first()

    if not pickup_point:
        db.session.rollback()
        raise PickupPointNotFoundError("pvz not found")

    existing_open = _open_reception_query(pvz_id).first()
    if existing_open:
        db.session.rollback()
        raise ReceptionAlreadyOpenError("there is already an open reception for this PVZ")

    reception = Reception(
        pvz_id=pvz_id,
        status=Reception.STATUS_IN_PROGRESS,
        date_time=utcnow(),
    )
    db.session.add(reception)

    commit_or_raise(ReceptionAlreadyOpenError("there is already an open reception for this PVZ"))

    return reception


def get_open_reception(pvz_id: str, *, lock: bool = False) -> Reception:
    """
    Return the in_progress reception of a pickup point.

    With lock=True the row stays locked until the caller commits, and the
    status filter is re-evaluated after the lock is granted.
    """
    query = _open_reception_query(pvz_id)
    if lock:
        query = lock_for_update(query)

    reception = query.first()
    if not reception:
        raise NoOpenReceptionError("no open reception found for this PVZ")

    return reception


def close_reception(reception_id: str) -> Reception:
    """
    Transition a reception from in_progress to close exactly once.

    IMMUTABLE: a second call fails and leaves the row untouched.
    """
    closed = compare_and_set(
        db.session.query(Reception).filter(
            Reception.id == reception_id,
            Reception.status == Reception.STATUS_IN_PROGRESS,
        ),
        {"status": Reception.STATUS_CLOSED},
    )

    if not closed:
        db.session.rollback()
        raise NoOpenReceptionError("reception is already closed")

    db.session.commit()

    reception = db.session.get(Reception, reception_id, populate_existing=True)
    return reception


def close_last_open_reception(pvz_id: str) -> Reception:
    """
    Close the pickup point's open reception.

    Raises:
        NoOpenReceptionError: nothing open, or a concurrent close won
    """
    reception = get_open_reception(pvz_id)
    return close_reception(reception.id)


def list_receptions(
    pvz_id: str,
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[Reception]:
    """Receptions of a pickup point, newest first, optionally within [start, end]."""
    query = db.session.query(Reception).filter(Reception.pvz_id == pvz_id)

    if start is not None:
        query = query.filter(Reception.date_time >= start)
    if end is not None:
        query = query.filter(Reception.date_time <= end)

    return query.order_by(Reception.date_time.desc(), Reception.id.desc()).all()
