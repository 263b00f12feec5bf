"""
Incident row parsing.

Converts raw tab-separated text into Incident records. Parsing is lenient:
a row that cannot be turned into an Incident is skipped and counted, and the
pass continues with the next row.

Row layout (0-based columns):
    0 date | 1 issue | 2 channel | 3 service | 4 impact type | 5 modality |
    6 (unused) | 7 start time | 8 end time | 9 duration | 10 reason (optional)
"""

import logging
from typing import List, Optional, Tuple

from pydantic import ValidationError

from src.core.config import config
from src.downtime.schema import Incident

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "\t"


def iter_rows(raw_text: str):
    """
    Yield non-blank rows of raw_text with line endings removed.

    Surrounding whitespace of the whole text is dropped first, so indentation
    left over from pasting does not leak into the first date field.
    """
    for line in raw_text.strip().split("\n"):
        line = line.rstrip("\r")
        if not line.strip():
            continue
        yield line


def parse_incident_line(line: str) -> Optional[Incident]:
    """
    Parse one tab-separated row.

    Args:
        line: A single row without its line terminator

    Returns:
        Incident, or None when the row is malformed

    Notes:
        - Rows with fewer than config.analysis.min_fields fields are malformed
        - Impact type and modality are trimmed and uppercased; a value outside
          FULL/PARTIAL or PLANNED/UNPLANNED (e.g. a header row) is malformed
        - An absent or empty reason becomes config.analysis.default_reason
    """
    columns = line.split(FIELD_SEPARATOR)
    if len(columns) < config.analysis.min_fields:
        logger.debug(f"Dropping row with {len(columns)} fields: {line[:80]!r}")
        return None

    impact_type = columns[4].strip().upper()
    modality = columns[5].strip().upper()
    reason = columns[10] if len(columns) > 10 and columns[10] else config.analysis.default_reason

    try:
        incident = Incident(
            date=columns[0],
            issue=columns[1],
            channel=columns[2],
            service=columns[3],
            impact_type=impact_type,
            modality=modality,
            start_time=columns[7],
            end_time=columns[8],
            duration=columns[9],
            reason=reason,
        )
    except ValidationError as e:
        logger.debug(f"Dropping row with invalid impact/modality ({impact_type}/{modality}): {e.error_count()} error(s)")
        return None

    logger.debug(
        "Parsed incident: impact=%s modality=%s channel=%s duration=%s",
        incident.impact_type.value,
        incident.modality.value,
        incident.channel,
        incident.duration,
    )
    return incident


def parse_incidents(raw_text: str) -> Tuple[List[Incident], int]:
    """
    Parse every row, collecting incidents and the dropped-row count.

    Args:
        raw_text: Newline-separated rows of tab-separated fields

    Returns:
        Tuple of (incidents in input order, dropped_count)

    Example:
        incidents, dropped = parse_incidents(text)
        logger.info(f"Parsed {len(incidents)} incidents, dropped {dropped}")
    """
    incidents: List[Incident] = []
    dropped = 0

    for line in iter_rows(raw_text):
        incident = parse_incident_line(line)
        if incident is not None:
            incidents.append(incident)
        else:
            dropped += 1

    return incidents, dropped
