"""
Incident source loading.

Incident sheets arrive either as pasted/saved tab-separated text or as Excel
workbooks. Both are turned into the same tab-separated text consumed by the
aggregation engine; the engine does not care where the text came from.

Design:
- Excel: first sheet only; typed dates, clock times and durations are
  rendered as the sheet displays them (3-Aug-25, 12:10 AM, 27:50:00)
- Tabs and line breaks inside cells are flattened to spaces so they cannot
  split a row or shift its columns
- Read failures raise IngestionError
"""

import logging
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import BinaryIO, Union

import pandas as pd

from src.core.exceptions import IngestionError

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = {".xlsx", ".xls"}

# Zero-based position of the Duration column in an incident row
DURATION_COLUMN = 9

# Serial day zero of Excel's 1900 date system
EXCEL_EPOCH = datetime(1899, 12, 30)


def read_incident_text(filepath: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read a tab-separated text file.

    Raises:
        IngestionError: If the file is missing or unreadable
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise IngestionError(f"Incident file not found: {filepath}")
    try:
        return filepath.read_text(encoding=encoding).lstrip("\ufeff")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading incident file {filepath}: {e}")
        raise IngestionError(f"Failed to read incident file: {e}") from e


def _clean_cell(value: object) -> str:
    text = str(value)
    for separator in ("\r\n", "\r", "\n", "\t"):
        text = text.replace(separator, " ")
    return text


def _format_hours(delta: timedelta) -> str:
    """Render a duration as H:MM:SS with hours past 24 kept in the hour field."""
    total = int(round(delta.total_seconds()))
    hours, remainder = divmod(max(total, 0), 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}"


def _format_date(value: date) -> str:
    return f"{value.day}-{value:%b-%y}"


def _format_clock(value: time) -> str:
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{value.hour % 12 or 12}:{value.minute:02d} {suffix}"


def _format_cell(value: object, column: int) -> str:
    """
    Render a typed workbook cell the way the sheet displays it.

    openpyxl hands back dates, clock times and [h]:mm:ss durations as
    datetime objects; the parser expects the displayed text instead.
    """
    if isinstance(value, timedelta):
        return _format_hours(value)
    if column == DURATION_COLUMN:
        if isinstance(value, datetime):
            return _format_hours(value - EXCEL_EPOCH)
        if isinstance(value, time):
            return _format_hours(timedelta(hours=value.hour, minutes=value.minute, seconds=value.second))
    if isinstance(value, datetime):
        if value.date() == EXCEL_EPOCH.date():
            return _format_clock(value.time())
        if value.time() == time(0, 0):
            return _format_date(value)
        return f"{_format_date(value)} {_format_clock(value.time())}"
    if isinstance(value, date):
        return _format_date(value)
    if isinstance(value, time):
        return _format_clock(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return _clean_cell(value)


def excel_to_tsv(source: Union[str, Path, BinaryIO]) -> str:
    """
    Convert the first sheet of an Excel workbook to tab-separated text.

    Args:
        source: Path or binary file object of an .xlsx/.xls workbook

    Returns:
        One line per sheet row, header row included (the parser drops it)

    Raises:
        IngestionError: If the workbook cannot be read
    """
    if isinstance(source, (str, Path)) and not Path(source).exists():
        raise IngestionError(f"Workbook not found: {source}")
    try:
        frame = pd.read_excel(
            source,
            sheet_name=0,
            header=None,
            dtype=object,
            keep_default_na=False,
            na_filter=False,
        )
    except Exception as e:
        logger.error(f"Error reading workbook {source}: {e}")
        raise IngestionError(f"Failed to read Excel workbook: {e}") from e

    lines = [
        "\t".join(_format_cell(cell, column) for column, cell in enumerate(row))
        for row in frame.itertuples(index=False)
    ]
    logger.debug(f"Converted workbook with {len(lines)} rows to TSV")
    return "\n".join(lines)


def load_incident_text(filepath: Union[str, Path], format: str = "auto") -> str:
    """
    Load incident rows from a file as tab-separated text.

    Args:
        filepath: Path to the source file
        format: "text", "excel", or "auto" (detect from suffix)

    Raises:
        IngestionError: If the file is missing, unreadable, or format unknown
    """
    filepath = Path(filepath)

    if format == "auto":
        format = "excel" if filepath.suffix.lower() in EXCEL_SUFFIXES else "text"

    if format == "text":
        return read_incident_text(filepath)
    if format == "excel":
        return excel_to_tsv(filepath)
    raise IngestionError(f"Unknown format: {format}")
