from __future__ import annotations

from ..extensions import db
from ..time_utils import to_utc_z, utcnow
from ._ids import new_id


CITIES = ("Москва", "Санкт-Петербург", "Казань")


class PickupPoint(db.Model):
    """
    Physical pickup point (PVZ).

    Created by a moderator; never mutated or deleted afterwards. The
    registration date is always assigned server-side.
    """
    __tablename__ = "pvz"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    registration_date = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    city = db.Column(db.String(64), nullable=False)

    receptions = db.relationship("Reception", back_populates="pickup_point", lazy=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "registrationDate": to_utc_z(self.registration_date),
            "city": self.city,
        }
