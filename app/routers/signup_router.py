# /app/routers/signup_router.py

# --- Core FastAPI Imports ---
import asyncio
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

# --- Service and Model Imports ---
from ..services import signup_service
from ..services.database_service import DatabaseService, get_db_service
from ..models.signup_model import SignupResult, SignupOutcome, SignupErrorKind

router = APIRouter()

# Failure kinds are all returned with a SignupResult body; only the status differs.
ERROR_STATUS_CODES = {
    SignupErrorKind.MISSING_REQUIRED_FIELD: status.HTTP_400_BAD_REQUEST,
    SignupErrorKind.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    SignupErrorKind.NO_CHALLENGE_SELECTED: status.HTTP_400_BAD_REQUEST,
    SignupErrorKind.MISSING_OTHER_DESCRIPTION: status.HTTP_400_BAD_REQUEST,
    SignupErrorKind.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    SignupErrorKind.STORE_NOT_PROVISIONED: status.HTTP_503_SERVICE_UNAVAILABLE,
    SignupErrorKind.STORE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def _read_raw_input(request: Request):
    """Accepts both classic form posts (repeated `challenges` keys) and JSON bodies."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            # Malformed JSON is treated as an empty form and fails validation.
            return {}
        return payload if isinstance(payload, dict) else {}
    return await request.form()


@router.post(
    "",
    response_model=SignupResult,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a Waitlist Signup",
    description="Validates and stores a signup form, then returns the refreshed challenge statistics.",
    responses={
        400: {"model": SignupResult, "description": "The form failed validation"},
        409: {"model": SignupResult, "description": "The email is already registered"},
        503: {"model": SignupResult, "description": "The signup tables are not provisioned"},
        500: {"model": SignupResult, "description": "The store failed"},
    },
)
async def submit_signup(
    request: Request,
    db: DatabaseService = Depends(get_db_service)
):
    raw_input = await _read_raw_input(request)
    # The service does blocking database and pandas work; keep it off the event loop.
    result = await asyncio.to_thread(signup_service.submit_signup, raw_input, db=db)

    if result.outcome == SignupOutcome.SUCCESS:
        return result

    return JSONResponse(
        status_code=ERROR_STATUS_CODES.get(result.errorKind, status.HTTP_500_INTERNAL_SERVER_ERROR),
        content=result.model_dump(mode="json", exclude_none=True),
    )
