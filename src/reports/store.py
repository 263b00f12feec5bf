"""
In-memory weekly report store.

Reports live for the lifetime of the process. The store is the only shared
mutable sink in the system, so every access goes through a lock; aggregation
itself needs none.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from src.core.exceptions import DataValidationError
from src.downtime.engine import aggregate
from src.downtime.schema import Summary

from .schema import WeeklyReport

logger = logging.getLogger(__name__)


class WeeklyReportStore:
    """
    Saved weekly summaries, listed most recent first.
    """

    def __init__(self) -> None:
        self._reports: List[WeeklyReport] = []
        self._lock = threading.Lock()

    def save(self, week_label: str, week_start: str, week_end: str, summary: Summary) -> WeeklyReport:
        """
        Store a summary under a week label.

        Raises:
            DataValidationError: If the label or either bound is missing
        """
        if not isinstance(week_label, str) or not week_label.strip():
            raise DataValidationError("Week label is required")
        if not week_start or not week_end:
            raise DataValidationError("Week start and end dates are required")

        report = WeeklyReport(
            id=f"report_{uuid4().hex}",
            week_label=week_label,
            week_start=str(week_start),
            week_end=str(week_end),
            created_at=datetime.now(timezone.utc),
            summary=summary,
        )
        with self._lock:
            self._reports.append(report)
        logger.info(f"Saved weekly report {report.id} ({week_label})")
        return report

    def save_from_text(
        self,
        week_label: str,
        week_start: str,
        week_end: str,
        raw_text: str,
        period_minutes: Optional[int] = None,
    ) -> WeeklyReport:
        """
        Aggregate raw incident text and store the resulting summary.
        """
        result = aggregate(raw_text, period_minutes)
        return self.save(week_label, week_start, week_end, result.summary)

    def list(self) -> List[WeeklyReport]:
        with self._lock:
            reports = list(self._reports)
        # stable sort: reports created in the same instant stay newest-saved first
        return sorted(reversed(reports), key=lambda r: r.created_at, reverse=True)

    def get(self, report_id: str) -> Optional[WeeklyReport]:
        with self._lock:
            return next((r for r in self._reports if r.id == report_id), None)

    def delete(self, report_id: str) -> bool:
        """
        Remove a report. Unknown ids are ignored.

        Returns:
            True if a report was removed
        """
        with self._lock:
            for index, report in enumerate(self._reports):
                if report.id == report_id:
                    del self._reports[index]
                    logger.info(f"Deleted weekly report {report_id}")
                    return True
        return False

    def __len__(self) -> int:
        with self._lock:
            return len(self._reports)
