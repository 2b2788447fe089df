# /app/services/challenge_helpers/chart_shaping.py

from typing import List

from ...models.challenge_model import ChallengeSnapshot, ChallengeChartItem

DEFAULT_LABEL_MAX_LENGTH = 15


def _truncate_label(label: str, max_length: int) -> str:
    return label[:max_length] + "..." if len(label) > max_length else label


def _format_percentage(count: int, total_users: int) -> str:
    if total_users == 0:
        return "0"
    return f"{count / total_users * 100:.1f}"


def build_chart_items(snapshot: ChallengeSnapshot, max_label_length: int = DEFAULT_LABEL_MAX_LENGTH) -> List[ChallengeChartItem]:
    """
    Shapes a snapshot for bar/pie charts and tables: zero counts are dropped,
    labels truncated, percentages attached, and items sorted by count
    descending. `perChallenge` is in catalog order and `sorted` is stable, so
    ties keep catalog order.
    """
    items = [
        ChallengeChartItem(
            challenge=_truncate_label(label, max_label_length),
            fullChallenge=label,
            count=count,
            percentage=_format_percentage(count, snapshot.totalUsers),
        )
        for label, count in snapshot.perChallenge.items()
        if count > 0
    ]
    return sorted(items, key=lambda item: item.count, reverse=True)


def without_zero_counts(snapshot: ChallengeSnapshot) -> ChallengeSnapshot:
    """The snapshot as shown to users: challenges nobody reported are left out."""
    return snapshot.model_copy(update={
        "perChallenge": {label: count for label, count in snapshot.perChallenge.items() if count > 0},
    })
