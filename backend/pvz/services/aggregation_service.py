"""
PVZ Aggregation Service

Read-only view that nests receptions and their products under each
pickup point:

    [{"pvz": {...}, "receptions": [{"reception": {...}, "products": [...]}]}]

PAGINATION counts distinct pickup points. The optional date range filters
pickup points through an EXISTS sub-query (at least one reception with
startDate <= dateTime <= endDate) instead of a join, so one pickup point
with several matching receptions never takes more than one slot of a page.
The same range then filters the nested receptions.

Any store failure aborts the whole page; partial results are never returned.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from ..extensions import db
from ..models import PickupPoint, Reception
from ..validation import DEFAULT_LIMIT, DEFAULT_PAGE
from . import product_service, reception_service


# Largest OFFSET the store can bind (signed 64-bit)
MAX_OFFSET = 2 ** 63 - 1


class AggregationError(RuntimeError):
    """Raised when any stage of the listing fails in the store."""
    pass


def _reception_in_range(start: datetime | None, end: datetime | None):
    conditions = [Reception.pvz_id == PickupPoint.id]
    if start is not None:
        conditions.append(Reception.date_time >= start)
    if end is not None:
        conditions.append(Reception.date_time <= end)
    return db.session.query(Reception.id).filter(*conditions).exists()


def fetch_pickup_point_page(
    start: datetime | None,
    end: datetime | None,
    page: int,
    limit: int,
) -> list[PickupPoint]:
    query = db.session.query(PickupPoint)

    if start is not None or end is not None:
        query = query.filter(_reception_in_range(start, end))

    return (
        query.order_by(PickupPoint.registration_date.desc(), PickupPoint.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )


def list_pickup_points(
    start_date: datetime | None = None,
    end_date: datetime | None = None,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
) -> list[dict]:
    """
    Build one page of the nested pickup-point view.

    page/limit are expected to be validated already
    (validation.parse_pagination). A page past the end yields [], including
    pages whose offset the store could not even represent.

    Raises:
        AggregationError: wrapping the underlying SQLAlchemyError
    """
    if (page - 1) * limit > MAX_OFFSET:
        return []

    try:
        pickup_points = fetch_pickup_point_page(start_date, end_date, page, limit)

        result = []
        for pickup_point in pickup_points:
            receptions = reception_service.list_receptions(pickup_point.id, start_date, end_date)
            result.append({
                "pvz": pickup_point.to_dict(),
                "receptions": [
                    {
                        "reception": reception.to_dict(),
                        "products": [
                            product.to_dict()
                            for product in product_service.list_products(reception.id)
                        ],
                    }
                    for reception in receptions
                ],
            })
    except SQLAlchemyError as exc:
        db.session.rollback()
        raise AggregationError("failed to get pvz list") from exc

    return result
