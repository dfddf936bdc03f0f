from __future__ import annotations

from ..extensions import db
from ..time_utils import to_utc_z, utcnow
from ._ids import new_id


PRODUCT_TYPES = ("электроника", "одежда", "обувь")


class Reception(db.Model):
    """
    Goods-reception session on a pickup point.

    LIFECYCLE:
    - in_progress: products may be appended / removed (LIFO)
    - close: terminal, never reopened; a new reception is a new row

    At most one in_progress reception per pickup point. The partial unique
    index below is the source of truth for that, the service-level check
    only produces the friendlier error.
    """
    __tablename__ = "receptions"

    STATUS_IN_PROGRESS = "in_progress"
    STATUS_CLOSED = "close"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    date_time = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    pvz_id = db.Column(db.String(36), db.ForeignKey("pvz.id"), nullable=False, index=True)
    status = db.Column(db.String(16), nullable=False, default=STATUS_IN_PROGRESS)

    pickup_point = db.relationship("PickupPoint", back_populates="receptions")
    products = db.relationship("Product", back_populates="reception", lazy=True)

    __table_args__ = (
        db.Index(
            "uq_receptions_one_open_per_pvz",
            "pvz_id",
            unique=True,
            sqlite_where=db.text("status = 'in_progress'"),
            postgresql_where=db.text("status = 'in_progress'"),
        ),
        db.CheckConstraint("status IN ('in_progress', 'close')", name="ck_receptions_status"),
    )

    @property
    def is_open(self) -> bool:
        return self.status == self.STATUS_IN_PROGRESS

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "dateTime": to_utc_z(self.date_time),
            "pvzId": self.pvz_id,
            "status": self.status,
        }


class Product(db.Model):
    """
    Item accepted during a reception.

    seq is a store-assigned, table-wide insertion ordinal (the integer
    primary key); it orders products whose date_time collides. The public
    id stays a UUID.
    """
    __tablename__ = "products"

    seq = db.Column(db.Integer, primary_key=True, autoincrement=True)
    id = db.Column(db.String(36), nullable=False, unique=True, default=new_id)
    date_time = db.Column(db.DateTime, nullable=False, default=utcnow)
    type = db.Column(db.String(32), nullable=False)
    reception_id = db.Column(db.String(36), db.ForeignKey("receptions.id"), nullable=False, index=True)

    reception = db.relationship("Reception", back_populates="products")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "dateTime": to_utc_z(self.date_time),
            "type": self.type,
            "receptionId": self.reception_id,
        }
