"""
Deduplicated downtime totals.

Totals are computed over incident groups, not raw rows, so an outage reported
for several channels counts its time window once.
"""

from typing import Iterable, Tuple

from src.downtime.reliability import round_percentage
from src.downtime.schema import ImpactType, IncidentGroup, Modality, Summary


def summarize_incidents(groups: Iterable[IncidentGroup]) -> Summary:
    """
    Compute the eight Summary counters in one pass over the groups.
    """
    counters = dict.fromkeys(Summary.model_fields, 0)

    for group in groups:
        duration = group.duration
        counters["total_incidents"] += 1
        counters["total_duration"] += duration

        full = group.impact_type == ImpactType.FULL
        if group.modality == Modality.PLANNED:
            counters["planned_duration"] += duration
            counters["planned_full_duration" if full else "planned_partial_duration"] += duration
        else:
            counters["unplanned_duration"] += duration
            counters["unplanned_full_duration" if full else "unplanned_partial_duration"] += duration

    return Summary(**counters)


def overall_availability(summary: Summary, period_minutes: int) -> Tuple[int, float]:
    """
    Aggregate service uptime across all channels.

    Every deduplicated downtime minute, planned or not, counts against the
    period here, unlike the per-channel reliability figures.

    Returns:
        Tuple of (uptime_minutes, availability_percentage), the percentage
        rounded to 2 decimals and clamped to [0, 100]
    """
    uptime_minutes = max(period_minutes - summary.total_duration, 0)
    return uptime_minutes, round_percentage(uptime_minutes / period_minutes * 100)
