# /app/models/signup_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from enum import Enum

from .challenge_model import ChallengeSnapshot

# --- Core Enumerations ---
class SignupOutcome(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"

class SignupErrorKind(str, Enum):
    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    INVALID_EMAIL = "InvalidEmail"
    NO_CHALLENGE_SELECTED = "NoChallengeSelected"
    MISSING_OTHER_DESCRIPTION = "MissingOtherDescription"
    DUPLICATE_EMAIL = "DuplicateEmail"
    STORE_NOT_PROVISIONED = "StoreNotProvisioned"
    STORE_ERROR = "StoreError"

class PersistenceStatus(str, Enum):
    FULL = "full"        # Signup and all challenge selections stored
    PARTIAL = "partial"  # Signup stored, challenge selections failed

# --- Input Models ---

class SignupForm(BaseModel):
    """
    A submitted form after trimming and normalization, before validation.
    Absent and blank values are both None; `challenges` holds catalog keys.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    countryCode: Optional[str] = None
    phone: Optional[str] = None
    subject: Optional[str] = None
    stayInLoop: bool = False
    challenges: List[str] = Field(default_factory=list)
    otherChallenge: Optional[str] = None

# --- API Contract Models ---

class SignupResult(BaseModel):
    """
    Defines the data contract for the outcome of a signup submission.
    Failures always carry a short `message`; `detail` is optional extra
    context. Only successful results carry `signupId`, `persistence` and
    (when it could be computed) `snapshot`.
    """
    outcome: SignupOutcome
    message: str
    errorKind: Optional[SignupErrorKind] = None
    detail: Optional[str] = None
    signupId: Optional[str] = None
    persistence: Optional[PersistenceStatus] = None
    snapshot: Optional[ChallengeSnapshot] = None


class SignupListItem(BaseModel):
    """One row of the admin signup listing."""
    id: str
    name: str
    email: str
    phone: Optional[str] = None
    subject: str
    stayInLoop: bool
    challenges: List[str]
    createdAt: Optional[datetime] = None


class SignupListResponse(BaseModel):
    results: List[SignupListItem]
    total: int
