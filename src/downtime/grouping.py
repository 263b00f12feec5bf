"""
Deduplication of multi-channel incident rows.

One outage that hits several channels is usually reported as one row per
channel. Rows sharing (date, start time, end time, issue) describe the same
outage window and are collapsed into a single IncidentGroup.

Design:
- Single pass, first-seen order preserved (dicts keep insertion order)
- The first row of a key fixes duration, modality and impact type; later
  rows only contribute their channel
- Groups are built once and never mutated afterwards
"""

import logging
from typing import Dict, Iterable, List

from src.downtime.durations import parse_duration
from src.downtime.schema import Incident, IncidentGroup, IncidentKey

logger = logging.getLogger(__name__)


def incident_key(incident: Incident) -> IncidentKey:
    """
    Composite key identifying the outage window a row belongs to.
    """
    return (incident.date, incident.start_time, incident.end_time, incident.issue)


def group_incidents(incidents: Iterable[Incident]) -> Dict[IncidentKey, IncidentGroup]:
    """
    Collapse rows describing the same outage window.

    Args:
        incidents: Parsed incident rows

    Returns:
        Dict mapping composite key -> IncidentGroup, in first-seen order

    Notes:
        - len(result) equals the number of distinct keys
        - Rows that disagree with the first row on duration, modality or
          impact type are logged; the first row still wins
    """
    first_rows: Dict[IncidentKey, Incident] = {}
    channels: Dict[IncidentKey, List[str]] = {}

    for incident in incidents:
        key = incident_key(incident)
        if key not in first_rows:
            first_rows[key] = incident
            channels[key] = [incident.channel]
            continue

        first = first_rows[key]
        if (incident.duration, incident.modality, incident.impact_type) != (
            first.duration,
            first.modality,
            first.impact_type,
        ):
            logger.debug(
                f"Inconsistent row for {key}: channel {incident.channel} differs from first-seen row; keeping first"
            )
        if incident.channel not in channels[key]:
            channels[key].append(incident.channel)

    return {
        key: IncidentGroup(
            key=key,
            duration=parse_duration(first.duration),
            channels=tuple(channels[key]),
            modality=first.modality,
            impact_type=first.impact_type,
        )
        for key, first in first_rows.items()
    }
