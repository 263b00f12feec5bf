"""
Canonical schema for downtime incidents and aggregation results.

Every input row is converted to an Incident before grouping, and every
aggregation pass returns an AggregationResult built from the models below.

Design rationale:
- Python attributes are snake_case; serialized output uses the camelCase
  names expected by presentation collaborators (model_dump(by_alias=True))
- Value models are frozen: a pass builds them once and never mutates them
- Durations are whole minutes
"""

from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ImpactType(str, Enum):
    """Whether the outage was a complete unavailability or a degradation."""
    FULL = "FULL"
    PARTIAL = "PARTIAL"


class Modality(str, Enum):
    """Whether the downtime was scheduled maintenance or an incident."""
    PLANNED = "PLANNED"
    UNPLANNED = "UNPLANNED"


class FrozenModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Incident(FrozenModel):
    """
    One raw incident row.

    Attributes:
        date: Day of the event in source format (e.g. "3-Aug-25")
        issue: Free-text description of the outage
        channel: Affected channel (e.g. "APP", "ADD MONEY")
        service: Affected service description
        impact_type: FULL or PARTIAL (normalized to uppercase)
        modality: PLANNED or UNPLANNED (normalized to uppercase)
        start_time: Start clock string as written in the source
        end_time: End clock string as written in the source
        duration: Duration string in H:MM:SS form
        reason: Root cause text, "Unspecified" when absent

    Notes:
        - Text fields are kept verbatim; only impact_type and modality are
          normalized, so grouping keys compare the raw strings
    """

    date: str
    issue: str
    channel: str
    service: str
    impact_type: ImpactType
    modality: Modality
    start_time: str
    end_time: str
    duration: str
    reason: str = "Unspecified"


IncidentKey = Tuple[str, str, str, str]


class IncidentGroup(FrozenModel):
    """
    One real-world outage window, possibly reported once per channel.

    duration, modality and impact_type come from the first row seen for the
    key; channels lists every distinct channel in first-seen order.
    """

    key: IncidentKey
    duration: int = Field(..., ge=0, description="Outage length in minutes")
    channels: Tuple[str, ...]
    modality: Modality
    impact_type: ImpactType


class ChannelDuration(FrozenModel):
    """Accumulated downtime minutes for one channel."""

    channel: str
    duration: int = Field(..., ge=0)


class ChartData(FrozenModel):
    """
    Per-channel downtime split into the four modality x impact buckets.

    A multi-channel outage contributes its full duration to every channel it
    touched, so bucket totals can exceed the deduplicated Summary figures.
    Each bucket is sorted by channel name.
    """

    planned_full: List[ChannelDuration] = Field(default_factory=list)
    unplanned_full: List[ChannelDuration] = Field(default_factory=list)
    planned_partial: List[ChannelDuration] = Field(default_factory=list)
    unplanned_partial: List[ChannelDuration] = Field(default_factory=list)


class Summary(FrozenModel):
    """
    Totals over deduplicated incident groups.

    Invariant: total_duration == planned_duration + unplanned_duration ==
    sum of the four modality x impact sub-totals.
    """

    total_incidents: int = Field(0, ge=0)
    total_duration: int = Field(0, ge=0)
    planned_duration: int = Field(0, ge=0)
    unplanned_duration: int = Field(0, ge=0)
    planned_full_duration: int = Field(0, ge=0)
    planned_partial_duration: int = Field(0, ge=0)
    unplanned_full_duration: int = Field(0, ge=0)
    unplanned_partial_duration: int = Field(0, ge=0)


class ReliabilityData(FrozenModel):
    """
    Reliability figures for one channel over the analysis period.

    Only unplanned FULL downtime reduces uptime_percentage.
    """

    channel: str
    planned_downtime: int = Field(..., ge=0)
    unplanned_full_downtime: int = Field(..., ge=0)
    total_minutes_in_period: int = Field(..., gt=0)
    uptime_percentage: float = Field(..., ge=0.0, le=100.0)


class AggregationResult(FrozenModel):
    """
    Complete output of one aggregation pass.

    Attributes:
        summary: Deduplicated totals
        chart_data: Per-channel category buckets
        incidents: Well-formed rows in input order
        reliability_data: One entry per channel, sorted by channel
        dropped_rows: Non-empty rows discarded as malformed
        period_minutes: Reliability period used for this pass
    """

    summary: Summary
    chart_data: ChartData
    incidents: List[Incident]
    reliability_data: List[ReliabilityData]
    dropped_rows: int = Field(0, ge=0)
    period_minutes: int = Field(..., gt=0)
