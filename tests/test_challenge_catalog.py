# /tests/test_challenge_catalog.py

from app.services.challenge_catalog import (
    CHALLENGE_CATALOG, SENTINEL_KEY, SENTINEL_LABEL,
    normalize_challenge_labels, render_selection, key_for_label,
)


def test_catalog_has_eleven_entries_ending_with_sentinel():
    assert len(CHALLENGE_CATALOG) == 11
    assert CHALLENGE_CATALOG[0].label == "Information Overload"
    assert CHALLENGE_CATALOG[-1].label == SENTINEL_LABEL
    assert CHALLENGE_CATALOG[-1].display_label == "Other"
    assert len({entry.key for entry in CHALLENGE_CATALOG}) == 11


def test_normalize_drops_unknown_labels_and_duplicates():
    keys = normalize_challenge_labels([
        "Limited Time for Learning",
        "Some Renamed Challenge",
        "Information Overload",
        "Limited Time for Learning",
    ])
    # Catalog order, each key once, the stale label gone.
    assert keys == ["information_overload", "limited_time_learning"]


def test_normalize_only_unknown_labels_is_empty():
    assert normalize_challenge_labels(["Not A Challenge", ""]) == []


def test_key_for_label_trims_whitespace():
    assert key_for_label("  Information Overload ") == "information_overload"
    assert key_for_label("Other") is None


def test_render_selection_expands_sentinel_with_description():
    rendered = render_selection([SENTINEL_KEY, "information_overload"], "Too many tabs open")
    assert rendered == ["Information Overload", "Other: Too many tabs open"]


def test_render_selection_without_description_uses_display_label():
    assert render_selection([SENTINEL_KEY]) == ["Other"]
