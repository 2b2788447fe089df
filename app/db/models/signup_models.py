# /app/db/models/signup_models.py

"""
This module defines the SQLAlchemy ORM models for the waitlist: the `Signup`
itself, the fixed `Challenge` catalog, and the `ChallengeSelection` join table
linking a signup to the challenges it reported.
"""

from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class Challenge(Base):
    """
    One row per catalog entry. The table is seeded with exactly the entries
    of `challenge_catalog.CHALLENGE_CATALOG` and never edited at runtime.
    """
    __tablename__ = "challenges"

    key = Column(String, primary_key=True)
    label = Column(String, nullable=False, unique=True)
    position = Column(Integer, nullable=False)


class Signup(Base):
    """
    SQLAlchemy model representing a single waitlist registration.
    """
    __tablename__ = "signups"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    # Always stored lowercase; the unique constraint is what resolves duplicate races.
    email = Column(String, unique=True, index=True, nullable=False)
    country_code = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    subject = Column(String, nullable=False)
    stay_in_loop = Column(Boolean, nullable=False, default=False)
    # Free-text elaboration for the "Other: Please Specify" challenge
    other_challenge = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    selections = relationship("ChallengeSelection", back_populates="signup", cascade="all, delete-orphan")


class ChallengeSelection(Base):
    __tablename__ = "challenge_selections"
    __table_args__ = (UniqueConstraint("signup_id", "challenge_key", name="uq_selection_signup_challenge"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    signup_id = Column(String, ForeignKey("signups.id", ondelete="CASCADE"), nullable=False, index=True)
    challenge_key = Column(String, ForeignKey("challenges.key"), nullable=False, index=True)

    signup = relationship("Signup", back_populates="selections")
    challenge = relationship("Challenge")
