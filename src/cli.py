"""
Command line entry point for the Downtime Analyzer.

Usage:
    python -m src.cli analyze incidents.tsv
    python -m src.cli analyze week32.xlsx --period-minutes 10080 --json
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from src.core.config import config
from src.core.exceptions import DowntimeAnalyzerError
from src.core.logging_config import setup_logging
from src.downtime import AggregationResult, aggregate, format_duration, load_incident_text, overall_availability

logger = logging.getLogger("src.cli")

_BUCKET_LABELS = [
    ("unplanned_full", "Unplanned Full"),
    ("unplanned_partial", "Unplanned Partial"),
    ("planned_full", "Planned Full"),
    ("planned_partial", "Planned Partial"),
]


def render_text(result: AggregationResult) -> str:
    summary = result.summary
    uptime_minutes, availability = overall_availability(summary, result.period_minutes)

    lines = [
        f"Incidents:          {summary.total_incidents} ({result.dropped_rows} rows dropped)",
        f"Total downtime:     {format_duration(summary.total_duration)}",
        f"Planned:            {summary.planned_duration} min",
        f"Unplanned:          {summary.unplanned_duration} min",
        f"Service uptime:     {uptime_minutes} of {result.period_minutes} min ({availability:.2f}%)",
        "",
        "Downtime by category:",
    ]
    for field, label in _BUCKET_LABELS:
        lines.append(f"  {label:<18} {getattr(summary, field + '_duration')} min")
        for item in getattr(result.chart_data, field):
            lines.append(f"    - {item.channel}: {item.duration} min")

    lines.append("")
    lines.append(f"{'Channel':<24}{'Uptime %':>10}{'Planned':>10}{'Unpl. full':>12}")
    for data in result.reliability_data:
        lines.append(
            f"{data.channel:<24}{data.uptime_percentage:>10.2f}{data.planned_downtime:>10}{data.unplanned_full_downtime:>12}"
        )
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Downtime incident aggregation and reliability report")
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Aggregate an incident sheet")
    analyze.add_argument("path", help="Tab-separated text file or Excel workbook")
    analyze.add_argument("--format", default="auto", choices=["auto", "text", "excel"])
    analyze.add_argument(
        "--period-minutes",
        type=int,
        default=config.analysis.period_minutes,
        help="Reliability period in minutes (default: one week)",
    )
    analyze.add_argument("--json", action="store_true", help="Print the result as JSON")
    analyze.add_argument("--log-level", default=None, help="Override DOWNTIME_LOG_LEVEL")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        setup_logging(level=args.log_level)
        raw_text = load_incident_text(args.path, format=args.format)
        result = aggregate(raw_text, args.period_minutes)
    except DowntimeAnalyzerError as exc:
        logger.error("Analysis failed: %s", exc)
        return 1

    if args.json:
        print(result.model_dump_json(by_alias=True, indent=2))
    else:
        print(render_text(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
