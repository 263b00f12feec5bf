"""
Pytest configuration and shared fixtures.

Provides test configuration instances and sample incident sheets for unit
and integration tests.
"""

from datetime import datetime, time, timedelta
from typing import Callable, List

import openpyxl
import pandas as pd
import pytest

from src.core.config import Config

HEADER = [
    "Date", "Issue", "Channel", "Service", "Impact Type", "Modality",
    "Resolved", "Start Time", "End Time", "Duration", "Reason",
]


@pytest.fixture
def mock_config(tmp_path):
    """
    Fixture providing test configuration with explicit values (not from .env).

    Returns:
        Config: Test instance writing logs under a temporary directory
    """
    return Config(log_level="WARNING", logs_dir=tmp_path / "logs")


@pytest.fixture
def make_row() -> Callable[..., str]:
    """
    Factory for one tab-separated incident row.

    Defaults describe a planned full outage of the APP channel lasting
    3:50:00 (230 minutes). Pass reason=None to omit the reason column.
    """
    def _make_row(
        channel: str = "APP",
        date: str = "3-Aug-25",
        issue: str = "Full DFS Down",
        impact: str = "FULL",
        modality: str = "PLANNED",
        start: str = "12:10 AM",
        end: str = "4:00 AM",
        duration: str = "3:50:00",
        reason: str = "Maintenance",
        service: str = "All Service",
    ) -> str:
        fields = [date, issue, channel, service, impact, modality, "NO", start, end, duration]
        if reason is not None:
            fields.append(reason)
        return "\t".join(fields)

    return _make_row


@pytest.fixture
def sample_rows(make_row) -> List[str]:
    """
    A realistic week of incidents.

    - One planned full maintenance window reported for APP and ADD MONEY (230 min)
    - One unplanned full outage of TRANSFER MONEY (59 min)
    - One unplanned partial degradation of APP (75 min, lowercase labels)
    - One planned partial window for ADD MONEY (30 min)
    """
    return [
        make_row(channel="APP"),
        make_row(channel="ADD MONEY"),
        make_row(
            channel="TRANSFER MONEY",
            date="5-Aug-25",
            issue="Transfer failures",
            impact="FULL",
            modality="UNPLANNED",
            start="2:01 PM",
            end="3:00 PM",
            duration="0:59:00",
            reason="Switch outage",
        ),
        make_row(
            channel="APP",
            date="6-Aug-25",
            issue="Slow login",
            impact="partial",
            modality=" unplanned ",
            start="9:00 AM",
            end="10:15 AM",
            duration="1:15:00",
            reason="",
        ),
        make_row(
            channel="ADD MONEY",
            date="7-Aug-25",
            issue="Card top-up window",
            impact="PARTIAL",
            modality="PLANNED",
            start="1:00 AM",
            end="1:30 AM",
            duration="0:30:00",
        ),
    ]


@pytest.fixture
def sample_text(sample_rows) -> str:
    return "\n".join(sample_rows)


@pytest.fixture
def sample_incident_dataframe(sample_rows) -> pd.DataFrame:
    """
    Sample sheet as a pandas DataFrame, header row included as data.
    """
    rows = [row.split("\t") for row in sample_rows]
    return pd.DataFrame([HEADER] + rows)


@pytest.fixture
def sample_workbook(tmp_path, sample_incident_dataframe):
    """
    Sample sheet written to an .xlsx workbook (openpyxl engine).
    """
    path = tmp_path / "incidents.xlsx"
    sample_incident_dataframe.to_excel(path, index=False, header=False, engine="openpyxl")
    return path


@pytest.fixture
def typed_workbook(tmp_path):
    """
    Workbook with native Excel cells: a date, clock times, and durations.

    The first incident runs 27:50:00 under an [h]:mm:ss format (1670 min);
    the second stores its 59 minute duration as a plain time of day.
    """
    workbook = openpyxl.Workbook()
    sheet = workbook.active
    sheet.append(HEADER)
    rows = [
        [datetime(2025, 8, 3), "Full DFS Down", "APP", "All Service", "FULL", "PLANNED", "NO",
         time(0, 10), time(4, 0), timedelta(hours=27, minutes=50), "Maint"],
        [datetime(2025, 8, 5), "Transfer failures", "TRANSFER MONEY", "All Service", "FULL", "UNPLANNED", "NO",
         time(14, 1), time(15, 0), time(0, 59), "Switch outage"],
    ]
    for row in rows:
        sheet.append(row)
    for row_number in (2, 3):
        sheet.cell(row=row_number, column=1).number_format = "d-mmm-yy"
        sheet.cell(row=row_number, column=8).number_format = "h:mm AM/PM"
        sheet.cell(row=row_number, column=9).number_format = "h:mm AM/PM"
    sheet.cell(row=2, column=10).number_format = "[h]:mm:ss"
    sheet.cell(row=3, column=10).number_format = "h:mm:ss"

    path = tmp_path / "typed.xlsx"
    workbook.save(path)
    return path


def pytest_configure(config):
    """
    Pytest hook for custom configuration.

    Registers custom markers used throughout tests.
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (deferred CI)"
    )
