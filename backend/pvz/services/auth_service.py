# Overview: Service-layer operations for auth; encapsulates business logic and database work.

"""
Authentication Service

Users register with email, password and role, and log in with email and
password to receive a bearer token (see token_service.py).

SECURITY NOTES:
- Passwords hashed with bcrypt (cost from BCRYPT_ROUNDS, default 12)
- Minimum 6 characters required
- Login failures never reveal whether the email exists
"""

from datetime import timedelta

import bcrypt
from flask import current_app
from sqlalchemy.exc import IntegrityError

from ..extensions import db
from ..models import User
from ..permissions import Role
from ..validation import (
    ConflictError,
    MIN_PASSWORD_LENGTH,
    ValidationError,
    parse_choice,
    validate_email,
)
from . import token_service


class PasswordValidationError(ValidationError):
    """Raised when password doesn't meet requirements."""
    pass


class UserExistsError(ConflictError):
    """Raised when the email is already registered."""
    pass


class InvalidCredentialsError(Exception):
    """Raised when email/password do not match a user."""
    pass


def validate_password_strength(password) -> None:
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        raise PasswordValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )


def hash_password(password: str, rounds: int | None = None) -> str:
    """
    Hash password using bcrypt.

    Password is validated before hashing.
    """
    validate_password_strength(password)
    if rounds is None:
        rounds = current_app.config.get("BCRYPT_ROUNDS", 12)
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')  # Store as string in database


def verify_password(password: str, password_hash: str) -> bool:
    """Timing-safe bcrypt check; malformed hashes simply do not match."""
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        return False


def register_user(email, password, role) -> User:
    """
    Create a new user.

    Raises:
        ValidationError: bad email, short password or unknown role
        UserExistsError: email already registered
    """
    email = validate_email(email)
    role = parse_choice(role, Role.ALL, "role")
    password_hash = hash_password(password)

    existing = db.session.query(User.id).filter_by(email=email).first()
    if existing:
        raise UserExistsError("user with this email already exists")

    user = User(email=email, password_hash=password_hash, role=role)
    db.session.add(user)

    try:
        db.session.commit()
    except IntegrityError:
        # Concurrent registration won the unique index
        db.session.rollback()
        raise UserExistsError("user with this email already exists")

    return user


def authenticate(email, password) -> User:
    """Return the user for valid credentials or raise InvalidCredentialsError."""
    if not isinstance(email, str) or not isinstance(password, str):
        raise InvalidCredentialsError("invalid email or password")

    user = db.session.query(User).filter_by(email=email.strip().lower()).first()
    if not user or not verify_password(password, user.password_hash):
        raise InvalidCredentialsError("invalid email or password")

    return user


def login(email, password) -> str:
    """Authenticate and issue a token for the user's role."""
    user = authenticate(email, password)
    return token_service.issue_token(
        user.role,
        current_app.config["JWT_SECRET"],
        _token_ttl(),
    )


def dummy_login(role) -> str:
    """
    Issue a token for role without checking any credentials.

    Test convenience only; gated solely by the role being valid.
    """
    role = parse_choice(role, Role.ALL, "role")
    return token_service.issue_token(role, current_app.config["JWT_SECRET"], _token_ttl())


def _token_ttl() -> timedelta:
    return timedelta(hours=current_app.config.get("JWT_TTL_HOURS", 24))
