# /app/routers/analytics_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends, Request
from typing import List

# --- Service and Model Imports ---
from ..services import challenge_stats_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.challenge_catalog import CHALLENGE_CATALOG, SENTINEL_KEY
from ..models.challenge_model import ChallengeChartResponse, CatalogChallenge

router = APIRouter()


@router.get(
    "/challenges-analytics",
    response_model=ChallengeChartResponse,
    summary="Get Challenge Chart Data",
    description="Per-challenge counts and percentages, sorted for the public analytics charts."
)
def get_challenges_analytics(
    request: Request,
    db: DatabaseService = Depends(get_db_service)
):
    """
    Thin router: delegate to the stats service. An unavailable store is not an
    error here; the payload comes back with `available: false` and no data.
    """
    settings = request.app.state.settings
    return challenge_stats_service.get_chart_data(db=db, max_label_length=settings.CHART_LABEL_MAX_LENGTH)


@router.get(
    "/challenges",
    response_model=List[CatalogChallenge],
    summary="Get the Challenge Catalog",
    description="The fixed list of challenges a signup form offers, in display order."
)
def get_challenge_catalog():
    return [
        CatalogChallenge(
            key=entry.key,
            label=entry.label,
            displayLabel=entry.display_label,
            requiresDescription=entry.key == SENTINEL_KEY,
        )
        for entry in CHALLENGE_CATALOG
    ]
