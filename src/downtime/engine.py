"""
Incident aggregation engine.

Runs one complete aggregation pass over raw tab-separated incident text:

    raw text -> parse_incidents -> group_incidents -> categorize_incidents
                                                   -> summarize_incidents
                                 -> calculate_reliability

The pass is pure and synchronous. It keeps no state between calls, so
concurrent passes over different inputs need no coordination.
"""

from __future__ import annotations

import logging
from typing import Optional

from src.core.config import config
from src.core.exceptions import DataValidationError

from .categorizer import categorize_incidents
from .grouping import group_incidents
from .parsers import parse_incidents
from .reliability import calculate_reliability
from .schema import AggregationResult
from .summary import summarize_incidents

logger = logging.getLogger(__name__)


def aggregate(raw_text: str, period_minutes: Optional[int] = None) -> AggregationResult:
    """
    Aggregate raw incident rows into summary, chart and reliability data.

    Args:
        raw_text: Newline-separated rows of tab-separated fields
        period_minutes: Reliability period (default config.analysis.period_minutes,
            one week)

    Returns:
        AggregationResult; malformed rows are dropped and counted in
        dropped_rows, empty input yields an all-zero result

    Raises:
        DataValidationError: If raw_text is not a string or period_minutes
            is not a positive integer
    """
    if not isinstance(raw_text, str):
        raise DataValidationError(f"Incident data must be text, got {type(raw_text).__name__}")
    if period_minutes is None:
        period_minutes = config.analysis.period_minutes
    if isinstance(period_minutes, bool) or not isinstance(period_minutes, int) or period_minutes <= 0:
        raise DataValidationError(f"period_minutes must be a positive integer, got {period_minutes!r}")

    incidents, dropped = parse_incidents(raw_text)
    groups = group_incidents(incidents)

    result = AggregationResult(
        summary=summarize_incidents(groups.values()),
        chart_data=categorize_incidents(groups.values()),
        incidents=incidents,
        reliability_data=calculate_reliability(incidents, period_minutes),
        dropped_rows=dropped,
        period_minutes=period_minutes,
    )

    logger.info(
        "Aggregated %d rows into %d incidents across %d channels (%d dropped)",
        len(incidents),
        len(groups),
        len(result.reliability_data),
        dropped,
    )
    return result
