# backend/pvz/config.py
from __future__ import annotations
import os


class Config:
    # Optional "SECRET_KEY", with default dev key
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    # SQLite DB stored in backend/instance/pvz.sqlite3
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL", #optional alternative location, e.g. postgresql+psycopg://...
        "sqlite:///pvz.sqlite3", #default local location
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Shared HS256 signing key; tokens are verifiable offline with it
    JWT_SECRET = os.environ.get("JWT_SECRET", "dev-jwt-secret-change-me")
    JWT_TTL_HOURS = int(os.environ.get("JWT_TTL_HOURS", "24"))

    BCRYPT_ROUNDS = int(os.environ.get("BCRYPT_ROUNDS", "12"))

    GRPC_PORT = int(os.environ.get("GRPC_PORT", "3000"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
