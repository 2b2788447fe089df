# /app/services/database_helpers/signup_repository_sql.py

"""
This module contains all the raw SQLAlchemy queries for the Signup, Challenge
and ChallengeSelection tables. It is the direct interface to the database for
the waitlist, and the only place where SQLAlchemy exceptions are caught and
classified into `StoreError`s.
"""

import uuid
from typing import List, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.db.models.signup_models import Signup, Challenge, ChallengeSelection
from ..challenge_catalog import CHALLENGE_CATALOG
from .store_errors import classify_store_exception


class SignupRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Signup Methods ---

    def add_signup(self, record: Dict) -> Signup:
        """
        Inserts one Signup row and commits. The id is assigned here, the
        creation timestamp by the database.
        """
        new_signup = Signup(id=f"sgn_{uuid.uuid4().hex[:12]}", **record)
        try:
            self.db.add(new_signup)
            self.db.commit()
            self.db.refresh(new_signup)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise classify_store_exception(e) from e
        return new_signup

    def add_challenge_selections(self, signup_id: str, challenge_keys: List[str]) -> int:
        """Inserts the join rows for an already committed signup, in their own commit."""
        try:
            for key in challenge_keys:
                self.db.add(ChallengeSelection(signup_id=signup_id, challenge_key=key))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise classify_store_exception(e) from e
        return len(challenge_keys)

    def get_all_signups(self) -> List[Signup]:
        """
        Retrieves every signup together with its selections, oldest first.
        The ordering is total (created_at, then id) so repeated reads of an
        unchanged table return identical sequences.
        """
        try:
            return (
                self.db.query(Signup)
                .options(selectinload(Signup.selections))
                .order_by(Signup.created_at.asc(), Signup.id.asc())
                .all()
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise classify_store_exception(e) from e

    # --- Challenge Catalog Methods ---

    def ensure_challenge_catalog(self) -> int:
        """
        Inserts any catalog rows that are missing. Safe to run on every
        startup; returns the number of rows added.
        """
        try:
            existing = {c.key for c in self.db.query(Challenge).all()}
            missing = [
                Challenge(key=entry.key, label=entry.label, position=position)
                for position, entry in enumerate(CHALLENGE_CATALOG)
                if entry.key not in existing
            ]
            if missing:
                self.db.add_all(missing)
                self.db.commit()
            return len(missing)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise classify_store_exception(e) from e
