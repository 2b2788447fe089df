# /app/services/signup_helpers/form_parsing.py

"""
Specialist helpers that turn a raw submission into a `SignupForm`.

A raw submission is a flat mapping of field name to one or many strings:
Starlette's `FormData` (repeated `challenges` keys), a decoded JSON object
(`challenges` as a list), or a plain dict in tests. Every value is trimmed
and blank values are treated exactly like absent ones.
"""

from typing import Any, List, Mapping, Optional

from ...models.signup_model import SignupForm
from ..challenge_catalog import normalize_challenge_labels

TRUTHY_VALUES = {"yes", "true", "1", "on"}


def _get_all(raw: Mapping[str, Any], field: str) -> List[str]:
    """Returns every trimmed, non-blank value submitted for `field`."""
    if hasattr(raw, "getlist"):
        values = raw.getlist(field)
    else:
        values = raw.get(field)
        if values is None:
            values = []
        elif isinstance(values, (str, bool)) or not hasattr(values, "__iter__"):
            values = [values]

    cleaned = []
    for value in values:
        if value is None:
            continue
        text = str(value).strip() if not isinstance(value, bool) else ("yes" if value else "no")
        if text:
            cleaned.append(text)
    return cleaned


def _get_one(raw: Mapping[str, Any], field: str) -> Optional[str]:
    values = _get_all(raw, field)
    return values[0] if values else None


def _parse_flag(value: Optional[str]) -> bool:
    return value is not None and value.lower() in TRUTHY_VALUES


def parse_signup_form(raw: Mapping[str, Any]) -> SignupForm:
    """
    Builds a SignupForm from raw input. Emails are lowercased, unknown
    challenge labels are dropped and the rest are mapped to catalog keys.
    """
    email = _get_one(raw, "email")
    return SignupForm(
        name=_get_one(raw, "name"),
        email=email.lower() if email else None,
        countryCode=_get_one(raw, "countryCode"),
        phone=_get_one(raw, "phone"),
        subject=_get_one(raw, "subject"),
        stayInLoop=_parse_flag(_get_one(raw, "stayInLoop")),
        challenges=normalize_challenge_labels(_get_all(raw, "challenges")),
        otherChallenge=_get_one(raw, "otherChallenge"),
    )
