# /app/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# By importing them all here, we ensure that the Base class knows about them
# when Alembic runs its auto-generation scan or `create_all` is called.

from .base_class import Base

from .models.signup_models import Challenge, Signup, ChallengeSelection
