# /app/services/signup_helpers/validation.py

import re
from typing import Optional

from ...models.signup_model import SignupForm, SignupResult, SignupOutcome, SignupErrorKind
from ..challenge_catalog import SENTINEL_KEY

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _failure(kind: SignupErrorKind, message: str, detail: Optional[str] = None) -> SignupResult:
    return SignupResult(outcome=SignupOutcome.FAILURE, errorKind=kind, message=message, detail=detail)


def validate_signup_form(form: SignupForm) -> Optional[SignupResult]:
    """
    Checks a parsed form in a fixed order and returns the first failure, or
    None when the form is valid. Nothing here touches the store.
    """
    if not form.name or not form.email or not form.subject:
        return _failure(
            SignupErrorKind.MISSING_REQUIRED_FIELD,
            "Missing required fields",
            "Please fill in all required fields (Name, Email, Subject)",
        )

    if not EMAIL_PATTERN.match(form.email):
        return _failure(
            SignupErrorKind.INVALID_EMAIL,
            "Invalid email address",
            "Please enter an email address like name@example.com",
        )

    if not form.challenges:
        return _failure(
            SignupErrorKind.NO_CHALLENGE_SELECTED,
            "No challenges selected",
            "Please select at least one learning challenge",
        )

    if SENTINEL_KEY in form.challenges and not form.otherChallenge:
        return _failure(
            SignupErrorKind.MISSING_OTHER_DESCRIPTION,
            "Please describe your other challenge",
            "You selected 'Other: Please Specify' but left the description empty",
        )

    return None
