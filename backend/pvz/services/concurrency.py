# Overview: Row locking and conditional-update helpers shared by the lifecycle services.

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from ..extensions import db


def lock_for_update(query):
    """
    Apply row-level locking for critical operations.

    NOTE: SQLite ignores SELECT ... FOR UPDATE (it serializes writers on its
    own), PostgreSQL honors it.
    """
    return query.with_for_update()


def compare_and_set(query, values: dict) -> bool:
    """
    Run a conditional UPDATE built from query and report whether it hit a row.

    query must already carry the expected-state filter (e.g. status ==
    'in_progress'); zero rows affected means another caller changed the row
    first. Nothing is committed here.
    """
    affected = query.update(values, synchronize_session=False)
    return affected > 0


def commit_or_raise(conflict_error: Exception):
    """
    Commit the current session; translate a constraint violation into
    conflict_error after rolling back.

    No retries: a conflicting writer means the invariant already holds
    without us.
    """
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        raise conflict_error from exc
