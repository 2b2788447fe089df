# /app/services/challenge_stats_service.py

"""
The read side of the waitlist: the challenge statistics snapshot, its chart
shaping, and the admin signup listing.

Every function here is read-only. A store that is missing, unreachable or not
yet provisioned is reported as `StatsUnavailable` rather than raised, so the
analytics pages can always render an empty state.
"""

import logging
from typing import List, Union

# --- Core Imports ---
from ..models.challenge_model import ChallengeSnapshot, StatsUnavailable, ChallengeChartResponse
from ..models.signup_model import SignupListItem, SignupListResponse
from .database_service import DatabaseService
from .database_helpers.store_errors import StoreError
from .challenge_catalog import render_selection
from .challenge_helpers.snapshot_counting import SignupChallenges, count_challenges
from .challenge_helpers.chart_shaping import build_chart_items, DEFAULT_LABEL_MAX_LENGTH

logger = logging.getLogger(__name__)


def _to_signup_challenges(signup) -> SignupChallenges:
    return SignupChallenges(
        signup_id=signup.id,
        challenge_keys=[selection.challenge_key for selection in signup.selections],
        other_description=signup.other_challenge,
    )


def compute_snapshot(db: DatabaseService) -> Union[ChallengeSnapshot, StatsUnavailable]:
    """
    Reads every signup with its selections in one pass and counts them.

    Args:
        db: An instance of the DatabaseService, provided by dependency injection.

    Returns:
        A ChallengeSnapshot, or StatsUnavailable when the store cannot be read.
    """
    if not db.is_configured:
        logger.warning("Challenge stats requested but no database is configured")
        return StatsUnavailable(reason="Database connection is not configured")

    try:
        all_signups = db.get_all_signups()
    except StoreError as e:
        logger.error("Could not read signups for challenge stats (%s): %s", e.kind.value, e.message)
        return StatsUnavailable(reason="Failed to fetch challenge data")

    return count_challenges([_to_signup_challenges(s) for s in all_signups])


def get_chart_data(db: DatabaseService, max_label_length: int = DEFAULT_LABEL_MAX_LENGTH) -> ChallengeChartResponse:
    """Snapshot shaped for the public analytics charts, or an empty payload when unavailable."""
    snapshot = compute_snapshot(db)
    if isinstance(snapshot, StatsUnavailable):
        return ChallengeChartResponse(available=False)

    return ChallengeChartResponse(
        available=True,
        data=build_chart_items(snapshot, max_label_length=max_label_length),
        totalSignups=snapshot.totalUsers,
        totalChallengeSelections=snapshot.totalSelections,
        averagePerUser=snapshot.averagePerUser,
    )


def _display_phone(country_code, phone):
    if phone and country_code:
        return f"{country_code} {phone}"
    return phone or None


def list_signups(db: DatabaseService) -> Union[SignupListResponse, StatsUnavailable]:
    """
    Lists every signup, newest first, with its challenges rendered for
    display ("Other: <text>" for the sentinel).
    """
    if not db.is_configured:
        return StatsUnavailable(reason="Database connection is not configured")

    try:
        all_signups = db.get_all_signups()
    except StoreError as e:
        logger.error("Could not read signups for listing (%s): %s", e.kind.value, e.message)
        return StatsUnavailable(reason="Failed to fetch signups")

    items: List[SignupListItem] = []
    for signup in reversed(all_signups):
        items.append(SignupListItem(
            id=signup.id,
            name=signup.name,
            email=signup.email,
            phone=_display_phone(signup.country_code, signup.phone),
            subject=signup.subject,
            stayInLoop=bool(signup.stay_in_loop),
            challenges=render_selection(
                [selection.challenge_key for selection in signup.selections],
                signup.other_challenge,
            ),
            createdAt=signup.created_at,
        ))

    return SignupListResponse(results=items, total=len(items))
