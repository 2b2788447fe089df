# /app/models/challenge_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field
from typing import Dict, List, Literal

# --- Model Definitions ---

class ChallengeSnapshot(BaseModel):
    """
    Defines the data contract for the point-in-time aggregate of all signups.
    It is always computed from the current store contents and never persisted.
    """

    totalUsers: int = Field(
        ...,
        description="The total number of signups.",
        example=4
    )

    perChallenge: Dict[str, int] = Field(
        ...,
        description="Signup count per challenge in catalog order. The 'Other: Please Specify' "
                    "entry is reported as 'Other'. Zero counts are included.",
        example={"Information Overload": 3, "Other": 1}
    )

    totalSelections: int = Field(
        ...,
        description="The sum of all counts in perChallenge.",
        example=4
    )

    averagePerUser: str = Field(
        ...,
        description="totalSelections / totalUsers to one decimal place, or '0' when there are no users.",
        example="1.0"
    )

    otherDescriptions: List[str] = Field(
        default_factory=list,
        description="Free-text descriptions from every signup that selected 'Other: Please Specify'."
    )


class StatsUnavailable(BaseModel):
    """Returned instead of a snapshot when the store cannot be read."""
    available: Literal[False] = False
    reason: str


class ChallengeChartItem(BaseModel):
    challenge: str = Field(..., description="The label, truncated for chart axes.")
    fullChallenge: str
    count: int
    percentage: str = Field(..., description="Share of all users to one decimal place, e.g. '75.0'.", example="75.0")


class ChallengeChartResponse(BaseModel):
    """
    Defines the data contract for the public analytics chart endpoint.
    When the store is unavailable, `available` is False and `data` is empty so
    the page can render its empty state.
    """
    available: bool = True
    data: List[ChallengeChartItem] = Field(default_factory=list)
    totalSignups: int = 0
    totalChallengeSelections: int = 0
    averagePerUser: str = "0"


class CatalogChallenge(BaseModel):
    key: str
    label: str
    displayLabel: str
    requiresDescription: bool = False
