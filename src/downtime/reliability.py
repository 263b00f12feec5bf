"""
Per-channel reliability over a fixed analysis period.

Planned maintenance and partial degradation are not counted as service
unavailability: only unplanned FULL outages reduce a channel's uptime.
"""

import logging
import math
from typing import Iterable, List, Optional

from src.core.config import config
from src.core.exceptions import DataValidationError
from src.downtime.grouping import group_incidents
from src.downtime.schema import ImpactType, Incident, Modality, ReliabilityData

logger = logging.getLogger(__name__)


def round_percentage(value: float) -> float:
    """
    Round half-up to 2 decimals and clamp to [0, 100].
    """
    rounded = math.floor(value * 100 + 0.5) / 100
    return min(max(rounded, 0.0), 100.0)


def channel_reliability(channel: str, incidents: Iterable[Incident], period_minutes: int) -> ReliabilityData:
    """
    Reliability figures for one channel.

    Args:
        channel: Channel name
        incidents: Rows to consider; only rows for this channel are used
        period_minutes: Length of the analysis period

    Notes:
        - Rows are regrouped by outage window within the channel, so a
          duplicated row for the same window counts once
    """
    groups = group_incidents(i for i in incidents if i.channel == channel)

    planned = 0
    unplanned_full = 0
    for group in groups.values():
        if group.modality == Modality.PLANNED:
            planned += group.duration
        elif group.impact_type == ImpactType.FULL:
            unplanned_full += group.duration

    uptime = (period_minutes - unplanned_full) / period_minutes * 100
    return ReliabilityData(
        channel=channel,
        planned_downtime=planned,
        unplanned_full_downtime=unplanned_full,
        total_minutes_in_period=period_minutes,
        uptime_percentage=round_percentage(uptime),
    )


def calculate_reliability(
    incidents: List[Incident],
    period_minutes: Optional[int] = None,
) -> List[ReliabilityData]:
    """
    Reliability figures for every channel appearing in incidents.

    Args:
        incidents: All parsed rows of one aggregation pass
        period_minutes: Analysis period (default config.analysis.period_minutes)

    Returns:
        List of ReliabilityData sorted by channel name

    Raises:
        DataValidationError: If period_minutes is not positive
    """
    if period_minutes is None:
        period_minutes = config.analysis.period_minutes
    if period_minutes <= 0:
        raise DataValidationError(f"period_minutes must be a positive number of minutes, got {period_minutes}")
    channels = sorted({incident.channel for incident in incidents})

    results = [channel_reliability(channel, incidents, period_minutes) for channel in channels]
    for data in results:
        if data.unplanned_full_downtime > period_minutes:
            logger.warning(
                f"{data.channel}: unplanned full downtime {data.unplanned_full_downtime} min exceeds period of {period_minutes} min"
            )
    return results
