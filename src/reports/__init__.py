"""
Weekly report store exports.
"""

from .schema import WeeklyReport
from .store import WeeklyReportStore

__all__ = [
    "WeeklyReport",
    "WeeklyReportStore",
]
