# /app/services/database_helpers/store_errors.py

"""
Classification of raw SQLAlchemy/DBAPI failures into the small set of store
error kinds the services know how to react to. Nothing above the repository
layer ever sees a SQLAlchemy exception.
"""

from enum import Enum

from sqlalchemy.exc import SQLAlchemyError, IntegrityError, OperationalError, InterfaceError, DBAPIError

# PostgreSQL SQLSTATE codes
PG_UNIQUE_VIOLATION = "23505"
PG_UNDEFINED_TABLE = "42P01"


class StoreErrorKind(str, Enum):
    UNIQUE_VIOLATION = "unique_violation"
    RELATION_MISSING = "relation_missing"
    UNAVAILABLE = "unavailable"
    OTHER = "other"


class StoreError(Exception):
    """A store failure that has already been classified."""

    def __init__(self, kind: StoreErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self):
        return f"StoreError(kind={self.kind.value!r}, message={self.message!r})"


def classify_store_exception(exc: SQLAlchemyError) -> StoreError:
    """Turns a SQLAlchemy exception into a StoreError with the matching kind."""
    orig = getattr(exc, "orig", None)
    message = str(orig) if orig is not None else str(exc)
    lowered = message.lower()
    # psycopg2 exposes `pgcode`, psycopg 3 exposes `sqlstate`
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)

    if code == PG_UNIQUE_VIOLATION or (isinstance(exc, IntegrityError) and "unique" in lowered):
        return StoreError(StoreErrorKind.UNIQUE_VIOLATION, message)

    if code == PG_UNDEFINED_TABLE or "no such table" in lowered or ("relation" in lowered and "does not exist" in lowered):
        return StoreError(StoreErrorKind.RELATION_MISSING, message)

    if isinstance(exc, (OperationalError, InterfaceError)) or (isinstance(exc, DBAPIError) and exc.connection_invalidated):
        return StoreError(StoreErrorKind.UNAVAILABLE, message)

    return StoreError(StoreErrorKind.OTHER, message)
