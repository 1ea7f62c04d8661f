"""
Thin query-execution layer shared by the models.

Statements are SQLAlchemy Core constructs, so every value is sent as a bound
parameter. Reads hand back ``RowMapping`` objects keyed by the labels the
statement declares; turning those into entities is the caller's job.
"""
from sqlalchemy.engine import RowMapping

from .extensions import db


def fetch_all(stmt) -> list[RowMapping]:
    return list(db.session.execute(stmt).mappings().all())


def fetch_one(stmt) -> RowMapping | None:
    return db.session.execute(stmt).mappings().first()


def insert_returning_id(stmt) -> int:
    """Runs an ``INSERT ... RETURNING id`` and commits it."""
    new_id = db.session.execute(stmt).scalar_one()
    db.session.commit()
    return new_id


def execute(stmt) -> None:
    db.session.execute(stmt)
    db.session.commit()
