# /app/services/signup_service.py

"""
This service module is the business logic layer for waitlist signups.

It orchestrates the specialist helpers in `signup_helpers` (parsing and
validation), the `DatabaseService` (persistence) and the challenge stats
service (the snapshot returned to the freshly signed-up user). Every outcome,
including store failures, is returned as a `SignupResult`; nothing here
raises to the router.
"""

import logging
from typing import Any, Mapping, Optional

from ..models.signup_model import (
    SignupForm, SignupResult, SignupOutcome, SignupErrorKind, PersistenceStatus,
)
from ..models.challenge_model import ChallengeSnapshot, StatsUnavailable
from .database_service import DatabaseService
from .database_helpers.store_errors import StoreError, StoreErrorKind
from .challenge_catalog import SENTINEL_KEY
from .signup_helpers.form_parsing import parse_signup_form
from .signup_helpers.validation import validate_signup_form
from . import challenge_stats_service

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Thank you for signing up! We'll be in touch soon."
PROVISIONING_HINT = (
    "The signup tables do not exist yet. Run `alembic upgrade head` against the "
    "configured database (or set AUTO_CREATE_SCHEMA=true for local development)."
)


def _build_signup_record(form: SignupForm) -> dict:
    return {
        "name": form.name,
        "email": form.email,
        "country_code": form.countryCode,
        "phone": form.phone,
        "subject": form.subject,
        "stay_in_loop": form.stayInLoop,
        # The description is only meaningful alongside the sentinel.
        "other_challenge": form.otherChallenge if SENTINEL_KEY in form.challenges else None,
    }


def _store_failure(error: StoreError) -> SignupResult:
    """Maps a classified store error onto the user-facing failure taxonomy."""
    if error.kind == StoreErrorKind.UNIQUE_VIOLATION:
        return SignupResult(
            outcome=SignupOutcome.FAILURE,
            errorKind=SignupErrorKind.DUPLICATE_EMAIL,
            message="This email is already registered",
            detail="Try signing up with a different email address",
        )
    if error.kind == StoreErrorKind.RELATION_MISSING:
        return SignupResult(
            outcome=SignupOutcome.FAILURE,
            errorKind=SignupErrorKind.STORE_NOT_PROVISIONED,
            message="Signups are not available yet",
            detail=f"{PROVISIONING_HINT} ({error.message})",
        )
    return SignupResult(
        outcome=SignupOutcome.FAILURE,
        errorKind=SignupErrorKind.STORE_ERROR,
        message="Failed to save signup",
        detail=error.message,
    )


def _snapshot_after_signup(db: DatabaseService) -> Optional[ChallengeSnapshot]:
    """Best-effort snapshot for the success view; any failure just omits it."""
    try:
        snapshot = challenge_stats_service.compute_snapshot(db)
    except Exception:
        logger.warning("Snapshot computation failed after a successful signup", exc_info=True)
        return None
    if isinstance(snapshot, StatsUnavailable):
        logger.warning("Snapshot unavailable after a successful signup: %s", snapshot.reason)
        return None
    return snapshot


def submit_signup(raw_input: Mapping[str, Any], db: DatabaseService) -> SignupResult:
    """
    Validates, normalizes and persists one signup.

    The signup row is the only write that decides the outcome. The challenge
    selections are written afterwards in their own commit; if that fails the
    signup stays registered and the result reports PARTIAL persistence.

    Args:
        raw_input: Field name to one-or-many submitted values.
        db: An instance of the DatabaseService, provided by dependency injection.

    Returns:
        A SignupResult describing success (with a snapshot when available)
        or the first failure encountered.
    """
    form = parse_signup_form(raw_input)

    failure = validate_signup_form(form)
    if failure is not None:
        logger.info("Rejected signup submission: %s", failure.errorKind.value)
        return failure

    # 1. PRIMARY WRITE: the signup row.
    try:
        signup = db.add_signup(_build_signup_record(form))
    except StoreError as e:
        if e.kind == StoreErrorKind.UNIQUE_VIOLATION:
            logger.info("Duplicate signup for an already registered email")
        else:
            logger.error("Failed to save signup (%s): %s", e.kind.value, e.message)
        return _store_failure(e)

    # 2. SECONDARY WRITE: the challenge selections, best effort.
    persistence = PersistenceStatus.FULL
    try:
        db.add_challenge_selections(signup.id, form.challenges)
    except StoreError as e:
        persistence = PersistenceStatus.PARTIAL
        logger.warning(
            "Signup %s saved but its challenge selections were not (%s): %s",
            signup.id, e.kind.value, e.message,
        )

    logger.info("Registered signup %s with %d challenge(s)", signup.id, len(form.challenges))

    # 3. ENRICH: a fresh snapshot for the post-signup chart.
    return SignupResult(
        outcome=SignupOutcome.SUCCESS,
        message=SUCCESS_MESSAGE,
        signupId=signup.id,
        persistence=persistence,
        snapshot=_snapshot_after_signup(db),
    )
