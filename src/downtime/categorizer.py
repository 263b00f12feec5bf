"""
Per-channel downtime breakdown by modality and impact type.

Every channel touched by an outage is considered down for the outage's full
duration, so a group spanning {A, B, C} adds its duration three times to the
matching bucket. Bucket totals therefore answer "how long was channel X down"
and are not additive into the deduplicated Summary.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from src.downtime.schema import ChannelDuration, ChartData, ImpactType, IncidentGroup, Modality

BUCKETS: Dict[Tuple[Modality, ImpactType], str] = {
    (Modality.PLANNED, ImpactType.FULL): "planned_full",
    (Modality.UNPLANNED, ImpactType.FULL): "unplanned_full",
    (Modality.PLANNED, ImpactType.PARTIAL): "planned_partial",
    (Modality.UNPLANNED, ImpactType.PARTIAL): "unplanned_partial",
}


def _to_sorted_list(totals: Dict[str, int]) -> List[ChannelDuration]:
    return [
        ChannelDuration(channel=channel, duration=duration)
        for channel, duration in sorted(totals.items())
    ]


def categorize_incidents(groups: Iterable[IncidentGroup]) -> ChartData:
    """
    Accumulate group durations per channel into the four buckets.

    Args:
        groups: Deduplicated incident groups (e.g. group_incidents(...).values())

    Returns:
        ChartData with each bucket sorted by channel name
    """
    totals: Dict[str, Dict[str, int]] = {name: defaultdict(int) for name in BUCKETS.values()}

    for group in groups:
        bucket = totals[BUCKETS[(group.modality, group.impact_type)]]
        for channel in group.channels:
            bucket[channel] += group.duration

    return ChartData(**{name: _to_sorted_list(channel_totals) for name, channel_totals in totals.items()})
