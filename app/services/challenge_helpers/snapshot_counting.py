# /app/services/challenge_helpers/snapshot_counting.py

"""
Specialist for the counting step of the challenge statistics. It works on
plain values (signup ids, keys, descriptions) that were already read from
the store, so it can be tested without a database.
"""

from typing import List, NamedTuple, Optional
import pandas as pd

from ...models.challenge_model import ChallengeSnapshot
from ..challenge_catalog import CHALLENGE_CATALOG, CATALOG_KEYS, SENTINEL_KEY


class SignupChallenges(NamedTuple):
    signup_id: str
    challenge_keys: List[str]
    other_description: Optional[str] = None


def _format_average(total_selections: int, total_users: int) -> str:
    if total_users == 0:
        return "0"
    return f"{total_selections / total_users:.1f}"


def count_challenges(signups: List[SignupChallenges]) -> ChallengeSnapshot:
    """
    Counts, for every catalog entry, how many signups reported it.

    A signup counts at most once per challenge, and keys outside the catalog
    are ignored. The sentinel is reported under its display label "Other";
    its free-text descriptions are collected separately in signup order.
    """
    pairs = [(s.signup_id, key) for s in signups for key in s.challenge_keys]
    pairs_df = pd.DataFrame(pairs, columns=["signup_id", "challenge_key"]).drop_duplicates()

    counts = (
        pairs_df["challenge_key"].value_counts()
        .reindex(CATALOG_KEYS, fill_value=0)
    )
    per_challenge = {entry.display_label: int(counts[entry.key]) for entry in CHALLENGE_CATALOG}

    total_users = len({s.signup_id for s in signups})
    total_selections = sum(per_challenge.values())

    other_descriptions = [
        s.other_description for s in signups
        if SENTINEL_KEY in s.challenge_keys and s.other_description
    ]

    return ChallengeSnapshot(
        totalUsers=total_users,
        perChallenge=per_challenge,
        totalSelections=total_selections,
        averagePerUser=_format_average(total_selections, total_users),
        otherDescriptions=other_descriptions,
    )
