# Overview: Service-layer operations for pickup points; encapsulates business logic and database work.

from __future__ import annotations

from datetime import datetime

from ..extensions import db
from ..models import PickupPoint
from ..models.pickup_points import CITIES
from ..time_utils import utcnow
from ..validation import NotFoundError, ValidationError


GRPC_LIST_LIMIT = 1000


class InvalidCityError(ValidationError):
    """Raised when the city is not one of the supported cities."""
    pass


class PickupPointNotFoundError(NotFoundError):
    """Raised when a pickup point id does not exist."""
    pass


def create_pickup_point(city, *, registered_at: datetime | None = None) -> PickupPoint:
    """
    Register a new pickup point.

    registered_at is a server-side override for seeding; HTTP clients never
    supply it.

    Raises:
        InvalidCityError: before any write if city is not supported
    """
    if not isinstance(city, str) or city not in CITIES:
        raise InvalidCityError(f"City must be one of: {', '.join(CITIES)}")

    pickup_point = PickupPoint(
        city=city,
        registration_date=registered_at or utcnow(),
    )

    db.session.add(pickup_point)
    db.session.commit()

    return pickup_point


def get_pickup_point(pvz_id: str) -> PickupPoint:
    pickup_point = db.session.get(PickupPoint, pvz_id)
    if not pickup_point:
        raise PickupPointNotFoundError("pvz not found")
    return pickup_point


def list_all_pickup_points(limit: int = GRPC_LIST_LIMIT) -> list[PickupPoint]:
    """Unfiltered listing, newest first, for cross-service integration."""
    return (
        db.session.query(PickupPoint)
        .order_by(PickupPoint.registration_date.desc(), PickupPoint.id.desc())
        .limit(limit)
        .all()
    )
