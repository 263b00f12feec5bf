"""
Downtime module: incident parsing, deduplication, and reliability metrics.

Pipeline:

    Incident sheet (TSV text / Excel)
        ↓
    Ingestion (src/downtime/ingestion.py) → tab-separated text
        ↓
    Parsing (src/downtime/parsers.py) → Incident
        ↓
    Grouping (src/downtime/grouping.py) → IncidentGroup
        ↓
    Categorizer / Summarizer / Reliability → ChartData, Summary, ReliabilityData
        ↓
    AggregationResult (src/downtime/engine.py)
"""

from src.downtime.categorizer import categorize_incidents
from src.downtime.durations import format_duration, parse_duration
from src.downtime.engine import aggregate
from src.downtime.grouping import group_incidents, incident_key
from src.downtime.ingestion import excel_to_tsv, load_incident_text, read_incident_text
from src.downtime.parsers import parse_incident_line, parse_incidents
from src.downtime.reliability import calculate_reliability, channel_reliability
from src.downtime.schema import (
    AggregationResult,
    ChannelDuration,
    ChartData,
    ImpactType,
    Incident,
    IncidentGroup,
    Modality,
    ReliabilityData,
    Summary,
)
from src.downtime.summary import overall_availability, summarize_incidents

__all__ = [
    # Schema
    "Incident",
    "ImpactType",
    "Modality",
    "IncidentGroup",
    "ChannelDuration",
    "ChartData",
    "Summary",
    "ReliabilityData",
    "AggregationResult",

    # Ingestion
    "read_incident_text",
    "excel_to_tsv",
    "load_incident_text",

    # Parsing
    "parse_duration",
    "format_duration",
    "parse_incident_line",
    "parse_incidents",

    # Aggregation
    "incident_key",
    "group_incidents",
    "categorize_incidents",
    "summarize_incidents",
    "overall_availability",
    "channel_reliability",
    "calculate_reliability",
    "aggregate",
]
