# /tests/test_challenge_stats_service.py

import pytest
from unittest.mock import MagicMock

from app.models.challenge_model import ChallengeSnapshot, StatsUnavailable
from app.services import challenge_stats_service, signup_service
from app.services.challenge_helpers.snapshot_counting import SignupChallenges, count_challenges
from app.services.challenge_helpers.chart_shaping import build_chart_items, without_zero_counts
from app.services.database_service import DatabaseService
from app.services.database_helpers.store_errors import StoreError, StoreErrorKind

# --- Test Data Fixtures ---

@pytest.fixture
def four_signups():
    """Three users report Information Overload, the fourth only Limited Time."""
    return [
        SignupChallenges("sgn_1", ["information_overload"]),
        SignupChallenges("sgn_2", ["information_overload", "limited_time_learning"]),
        SignupChallenges("sgn_3", ["information_overload", "other"], "Procrastination"),
        SignupChallenges("sgn_4", ["limited_time_learning"]),
    ]

# --- Counting ---

def test_count_challenges(four_signups):
    snapshot = count_challenges(four_signups)

    assert snapshot.totalUsers == 4
    assert snapshot.perChallenge["Information Overload"] == 3
    assert snapshot.perChallenge["Limited Time for Learning"] == 2
    assert snapshot.perChallenge["Other"] == 1
    assert snapshot.perChallenge["Slow Knowledge Absorption"] == 0
    assert snapshot.totalSelections == 6
    assert snapshot.averagePerUser == "1.5"
    assert snapshot.otherDescriptions == ["Procrastination"]
    # Catalog order with the sentinel collapsed to "Other".
    assert list(snapshot.perChallenge)[0] == "Information Overload"
    assert list(snapshot.perChallenge)[-1] == "Other"


def test_count_challenges_empty():
    snapshot = count_challenges([])

    assert snapshot.totalUsers == 0
    assert snapshot.totalSelections == 0
    assert snapshot.averagePerUser == "0"
    assert all(count == 0 for count in snapshot.perChallenge.values())
    assert len(snapshot.perChallenge) == 11


def test_count_challenges_counts_repeats_once_per_signup():
    snapshot = count_challenges([SignupChallenges("sgn_1", ["information_overload", "information_overload"])])
    assert snapshot.perChallenge["Information Overload"] == 1
    assert snapshot.totalSelections == 1


def test_users_without_selections_still_count_as_users():
    snapshot = count_challenges([SignupChallenges("sgn_1", []), SignupChallenges("sgn_2", ["other"], None)])
    assert snapshot.totalUsers == 2
    assert snapshot.perChallenge["Other"] == 1
    assert snapshot.otherDescriptions == []
    assert snapshot.averagePerUser == "0.5"

# --- Chart Shaping ---

def test_chart_items_percentages_and_order(four_signups):
    items = build_chart_items(count_challenges(four_signups))

    assert [i.fullChallenge for i in items] == ["Information Overload", "Limited Time for Learning", "Other"]
    assert items[0].count == 3
    assert items[0].percentage == "75.0"
    assert items[1].percentage == "50.0"
    assert items[2].percentage == "25.0"


def test_chart_items_truncate_long_labels(four_signups):
    items = build_chart_items(count_challenges(four_signups), max_label_length=15)

    assert items[1].challenge == "Limited Time fo..."
    assert items[1].fullChallenge == "Limited Time for Learning"
    assert items[2].challenge == "Other"


def test_chart_ties_keep_catalog_order():
    snapshot = ChallengeSnapshot(
        totalUsers=2,
        perChallenge={"Information Overload": 1, "Slow Knowledge Absorption": 2, "Limited Time for Learning": 1, "Other": 0},
        totalSelections=4,
        averagePerUser="2.0",
    )
    items = build_chart_items(snapshot)

    assert [i.fullChallenge for i in items] == ["Slow Knowledge Absorption", "Information Overload", "Limited Time for Learning"]


def test_chart_items_empty_snapshot():
    assert build_chart_items(count_challenges([])) == []


def test_without_zero_counts_keeps_totals(four_signups):
    snapshot = count_challenges(four_signups)

    shown = without_zero_counts(snapshot)

    assert shown.perChallenge == {"Information Overload": 3, "Limited Time for Learning": 2, "Other": 1}
    assert shown.totalUsers == snapshot.totalUsers
    assert shown.totalSelections == snapshot.totalSelections
    # The full snapshot is left untouched.
    assert len(snapshot.perChallenge) == 11


# --- Service Against The Store ---

def test_compute_snapshot_from_store(db_service, valid_form):
    for i, challenges in enumerate([
        ["Information Overload"],
        ["Information Overload", "Gaps in Existing Knowledge"],
        ["Information Overload"],
        ["Fragmented Learning Resources"],
    ]):
        signup_service.submit_signup(dict(valid_form, email=f"user{i}@example.com", challenges=challenges), db=db_service)

    snapshot = challenge_stats_service.compute_snapshot(db_service)

    assert snapshot.totalUsers == 4
    assert snapshot.perChallenge["Information Overload"] == 3
    items = build_chart_items(snapshot)
    assert items[0].fullChallenge == "Information Overload"
    assert items[0].percentage == "75.0"


def test_compute_snapshot_is_repeatable(db_service, valid_form):
    signup_service.submit_signup(valid_form, db=db_service)

    first = challenge_stats_service.compute_snapshot(db_service)
    second = challenge_stats_service.compute_snapshot(db_service)

    assert first.model_dump_json() == second.model_dump_json()


def test_unreachable_store_is_unavailable():
    mock_db = MagicMock()
    mock_db.is_configured = True
    mock_db.get_all_signups.side_effect = StoreError(StoreErrorKind.UNAVAILABLE, "could not connect to server")

    result = challenge_stats_service.compute_snapshot(mock_db)

    assert isinstance(result, StatsUnavailable)
    assert result.available is False


def test_unconfigured_store_is_unavailable():
    result = challenge_stats_service.compute_snapshot(DatabaseService(db_session=None))
    assert isinstance(result, StatsUnavailable)

    chart = challenge_stats_service.get_chart_data(DatabaseService(db_session=None))
    assert chart.available is False
    assert chart.data == []
    assert chart.totalSignups == 0


def test_unprovisioned_store_is_unavailable(unprovisioned_db_service):
    assert isinstance(challenge_stats_service.compute_snapshot(unprovisioned_db_service), StatsUnavailable)

# --- Signup Listing ---

def test_list_signups_renders_other_and_phone(db_service, valid_form):
    signup_service.submit_signup(
        dict(valid_form, challenges=["Information Overload", "Other: Please Specify"], otherChallenge="Too many tabs"),
        db=db_service,
    )

    listing = challenge_stats_service.list_signups(db_service)

    assert listing.total == 1
    item = listing.results[0]
    assert item.email == "ada@example.com"
    assert item.phone == "+44 20 7946 0000"
    assert item.challenges == ["Information Overload", "Other: Too many tabs"]
