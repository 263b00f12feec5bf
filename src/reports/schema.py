"""
Schema for saved weekly reports.

A report keeps only the deduplicated Summary of the pass that produced it,
plus caller-supplied labelling.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from src.downtime.schema import FrozenModel, Summary


class WeeklyReport(FrozenModel):
    """
    A saved weekly summary.

    Fields:
    - id: generated identifier
    - week_label: caller-supplied label, e.g. "Week 32"
    - week_start / week_end: caller-supplied period bounds
    - created_at: UTC creation time, used for ordering
    - summary: Summary of the aggregation pass that produced the report
    """

    id: str
    week_label: str = Field(..., min_length=1)
    week_start: str = Field(..., min_length=1)
    week_end: str = Field(..., min_length=1)
    created_at: datetime
    summary: Summary
