# /app/services/challenge_catalog.py

"""
The fixed catalog of learning challenges and the pure helpers that map
submitted form labels onto it. Both the signup intake and the stats
aggregation go through this module so they always agree on keys, labels and
ordering.
"""

from typing import Dict, Iterable, List, NamedTuple, Optional


class CatalogEntry(NamedTuple):
    key: str
    label: str
    display_label: str


SENTINEL_LABEL = "Other: Please Specify"
SENTINEL_KEY = "other"
OTHER_DISPLAY_LABEL = "Other"

# Order matters: it is the display order and the tie-break order for charts.
CHALLENGE_CATALOG: List[CatalogEntry] = [
    CatalogEntry("information_overload", "Information Overload", "Information Overload"),
    CatalogEntry("difficulty_finding_content", "Difficulty Finding Relevant Content", "Difficulty Finding Relevant Content"),
    CatalogEntry("personalized_learning", "Struggling with Personalized Learning", "Struggling with Personalized Learning"),
    CatalogEntry("slow_knowledge_absorption", "Slow Knowledge Absorption", "Slow Knowledge Absorption"),
    CatalogEntry("inconsistent_skill_development", "Inconsistent Skill Development", "Inconsistent Skill Development"),
    CatalogEntry("lack_realtime_feedback", "Lack of Real-Time Feedback", "Lack of Real-Time Feedback"),
    CatalogEntry("gaps_existing_knowledge", "Gaps in Existing Knowledge", "Gaps in Existing Knowledge"),
    CatalogEntry("limited_time_learning", "Limited Time for Learning", "Limited Time for Learning"),
    CatalogEntry("overwhelmed_complex_topics", "Overwhelmed by Complex Topics", "Overwhelmed by Complex Topics"),
    CatalogEntry("fragmented_resources", "Fragmented Learning Resources", "Fragmented Learning Resources"),
    CatalogEntry(SENTINEL_KEY, SENTINEL_LABEL, OTHER_DISPLAY_LABEL),
]

CATALOG_KEYS: List[str] = [entry.key for entry in CHALLENGE_CATALOG]
_KEY_BY_LABEL: Dict[str, str] = {entry.label: entry.key for entry in CHALLENGE_CATALOG}


def key_for_label(label: str) -> Optional[str]:
    """Returns the catalog key for a submitted label, or None if it is not in the catalog."""
    return _KEY_BY_LABEL.get(label.strip()) if label else None


def normalize_challenge_labels(labels: Iterable[str]) -> List[str]:
    """
    Maps submitted labels to catalog keys.

    Unrecognized labels (stale or renamed on the client) are dropped silently,
    repeated labels count once, and the result follows catalog order so the
    same selection always normalizes to the same list.
    """
    selected = {key_for_label(label) for label in labels}
    return [key for key in CATALOG_KEYS if key in selected]


def render_selection(keys: Iterable[str], other_challenge: Optional[str] = None) -> List[str]:
    """
    Renders stored keys as human-readable strings for listings.
    The sentinel becomes "Other: <text>" here, and only here.
    """
    rendered = []
    key_set = set(keys)
    for entry in CHALLENGE_CATALOG:
        if entry.key not in key_set:
            continue
        if entry.key == SENTINEL_KEY and other_challenge:
            rendered.append(f"{OTHER_DISPLAY_LABEL}: {other_challenge}")
        else:
            rendered.append(entry.display_label)
    return rendered
