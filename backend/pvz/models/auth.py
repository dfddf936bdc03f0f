from __future__ import annotations

from ..extensions import db
from ..permissions import Role
from ._ids import new_id


class User(db.Model):
    """
    Registered operator account.

    Email is globally unique. The role is fixed at registration and is the
    only claim carried into issued tokens.
    """
    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    email = db.Column(db.String(255), nullable=False, unique=True, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(16), nullable=False)

    __table_args__ = (
        db.CheckConstraint(
            "role IN ('%s')" % "', '".join(Role.ALL),
            name="ck_users_role",
        ),
    )

    def to_dict(self) -> dict:
        # password_hash is never serialized
        return {
            "id": self.id,
            "email": self.email,
            "role": self.role,
        }
