# /app/services/database_service.py

from typing import List, Dict, Optional, Generator
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db

# --- Repository Imports ---
from .database_helpers.signup_repository_sql import SignupRepositorySQL
from .database_helpers.store_errors import StoreError, StoreErrorKind

NOT_CONFIGURED_MESSAGE = "Database connection is not configured"


class DatabaseService:
    def __init__(self, db_session: Optional[Session] = None):
        """
        Initializes the DatabaseService.
        Without a session the service is in the "not configured" state: every
        data method raises a StoreError of kind UNAVAILABLE, and callers can
        check `is_configured` up front.
        """
        self.signup_repo = SignupRepositorySQL(db_session) if db_session is not None else None

    @property
    def is_configured(self) -> bool:
        return self.signup_repo is not None

    def _repo(self) -> SignupRepositorySQL:
        if self.signup_repo is None:
            raise StoreError(StoreErrorKind.UNAVAILABLE, NOT_CONFIGURED_MESSAGE)
        return self.signup_repo

    # --- SIGNUP METHODS (DELEGATED) ---
    def add_signup(self, signup_record: Dict): return self._repo().add_signup(signup_record)
    def add_challenge_selections(self, signup_id: str, challenge_keys: List[str]) -> int: return self._repo().add_challenge_selections(signup_id, challenge_keys)
    def get_all_signups(self) -> List: return self._repo().get_all_signups()

    # --- CATALOG METHODS (DELEGATED) ---
    def ensure_challenge_catalog(self) -> int: return self._repo().ensure_challenge_catalog()


def get_db_service(db: Optional[Session] = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService instance bound to the
    request's session (or an unconfigured one when there is no database).
    """
    yield DatabaseService(db_session=db)
