# Overview: Service-layer operations for products; encapsulates business logic and database work.

"""
Product Lifecycle Service

Products are appended to, and removed LIFO from, the open reception of a
pickup point. Both operations lock the open reception row so they cannot
interleave with a concurrent close.

The tie-breaking seq is the table's autoincrement key, assigned by the
store on insert, so concurrent appends never collide on it.
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from ..extensions import db
from ..models import Product
from ..models.receptions import PRODUCT_TYPES
from ..time_utils import utcnow
from ..validation import ConflictError, ValidationError
from .reception_service import get_open_reception


class InvalidProductTypeError(ValidationError):
    """Raised when the product type is not supported."""
    pass


class NoProductsError(ConflictError):
    """Raised when the open reception has nothing to remove."""
    pass


def _newest_first(query):
    # seq is assigned by the store on insert and breaks timestamp ties
    return query.order_by(Product.date_time.desc(), Product.seq.desc())


def add_product(pvz_id: str, product_type) -> Product:
    """
    Append a product to the pickup point's open reception.

    Raises:
        InvalidProductTypeError: before touching the store
        NoOpenReceptionError: no in_progress reception
    """
    if not isinstance(product_type, str) or product_type not in PRODUCT_TYPES:
        raise InvalidProductTypeError(f"type must be one of: {', '.join(PRODUCT_TYPES)}")

    try:
        reception = get_open_reception(pvz_id, lock=True)
    except ConflictError:
        db.session.rollback()
        raise

    product = Product(
        type=product_type,
        reception_id=reception.id,
        date_time=utcnow(),
    )

    db.session.add(product)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    return product


def remove_last_product(pvz_id: str) -> None:
    """
    Delete the most recently added product of the open reception.

    Raises:
        NoOpenReceptionError: no in_progress reception
        NoProductsError: open reception is empty
    """
    try:
        reception = get_open_reception(pvz_id, lock=True)
    except ConflictError:
        db.session.rollback()
        raise

    last_product = _newest_first(
        db.session.query(Product).filter(Product.reception_id == reception.id)
    ).first()

    if not last_product:
        db.session.rollback()
        raise NoProductsError("no products found for this reception")

    db.session.delete(last_product)
    db.session.commit()


def list_products(reception_id: str) -> list[Product]:
    """Products of a reception, newest first."""
    return _newest_first(
        db.session.query(Product).filter(Product.reception_id == reception_id)
    ).all()
