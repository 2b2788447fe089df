# /app/routers/admin_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..services import challenge_stats_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.challenge_helpers.chart_shaping import without_zero_counts
from ..models.challenge_model import ChallengeSnapshot, StatsUnavailable
from ..models.signup_model import SignupListResponse

router = APIRouter()


@router.get(
    "/challenge-stats",
    response_model=ChallengeSnapshot,
    summary="Get Challenge Statistics",
    responses={503: {"description": "The store is not configured or cannot be read"}}
)
def get_challenge_stats(db: DatabaseService = Depends(get_db_service)):
    """
    Endpoint for the admin dashboard: the snapshot with its totals and
    the free-text 'Other' descriptions. Challenges nobody reported are omitted.
    """
    snapshot = challenge_stats_service.compute_snapshot(db=db)
    if isinstance(snapshot, StatsUnavailable):
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=snapshot.model_dump())
    return without_zero_counts(snapshot)


@router.get(
    "/signups",
    response_model=SignupListResponse,
    summary="List All Signups",
    responses={503: {"description": "The store is not configured or cannot be read"}}
)
def get_signups(db: DatabaseService = Depends(get_db_service)):
    signups = challenge_stats_service.list_signups(db=db)
    if isinstance(signups, StatsUnavailable):
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=signups.model_dump())
    return signups
