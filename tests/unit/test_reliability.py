"""
Unit tests for per-channel reliability.
"""

import pytest

from src.core.exceptions import DataValidationError
from src.downtime.parsers import parse_incidents
from src.downtime.reliability import calculate_reliability, channel_reliability, round_percentage


def _reliability(text, period_minutes=10080):
    incidents, _ = parse_incidents(text)
    return calculate_reliability(incidents, period_minutes)


def test_unplanned_full_reduces_uptime(make_row):
    data = _reliability(make_row(channel="TRANSFER MONEY", modality="UNPLANNED", duration="0:59:00"))

    assert len(data) == 1
    assert data[0].channel == "TRANSFER MONEY"
    assert data[0].unplanned_full_downtime == 59
    assert data[0].planned_downtime == 0
    assert data[0].total_minutes_in_period == 10080
    assert data[0].uptime_percentage == 99.41


def test_planned_and_partial_do_not_reduce_uptime(make_row):
    data = _reliability("\n".join([
        make_row(channel="APP", modality="PLANNED", impact="FULL", date="1-Aug-25"),
        make_row(channel="APP", modality="PLANNED", impact="PARTIAL", date="2-Aug-25", duration="0:30:00"),
        make_row(channel="APP", modality="UNPLANNED", impact="PARTIAL", date="3-Aug-25", duration="2:00:00"),
    ]))

    assert data[0].planned_downtime == 260
    assert data[0].unplanned_full_downtime == 0
    assert data[0].uptime_percentage == 100.0


def test_duplicate_rows_within_channel_count_once(make_row):
    row = make_row(channel="APP", modality="UNPLANNED")

    data = _reliability("\n".join([row, row]))

    assert data[0].unplanned_full_downtime == 230


def test_sorted_by_channel(sample_text):
    data = _reliability(sample_text)

    assert [d.channel for d in data] == ["ADD MONEY", "APP", "TRANSFER MONEY"]
    assert [d.planned_downtime for d in data] == [260, 230, 0]
    assert [d.uptime_percentage for d in data] == [100.0, 100.0, 99.41]


def test_custom_period(make_row):
    data = _reliability(make_row(modality="UNPLANNED", duration="1:00:00"), period_minutes=1440)

    assert data[0].total_minutes_in_period == 1440
    assert data[0].uptime_percentage == 95.83


@pytest.mark.parametrize("period", [0, -60])
def test_non_positive_period_rejected(make_row, period):
    incidents, _ = parse_incidents(make_row())

    with pytest.raises(DataValidationError):
        calculate_reliability(incidents, period)


def test_default_period_from_config(make_row):
    incidents, _ = parse_incidents(make_row())

    assert calculate_reliability(incidents)[0].total_minutes_in_period == 10080


def test_downtime_longer_than_period_clamped(make_row):
    data = _reliability(make_row(modality="UNPLANNED", duration="200:00:00"))

    assert data[0].unplanned_full_downtime == 12000
    assert data[0].uptime_percentage == 0.0


def test_channel_reliability_ignores_other_channels(sample_text):
    incidents, _ = parse_incidents(sample_text)

    data = channel_reliability("APP", incidents, 10080)

    assert data.planned_downtime == 230
    assert data.unplanned_full_downtime == 0


def test_empty_incidents():
    assert calculate_reliability([]) == []


@pytest.mark.parametrize(
    "value,expected",
    [
        (99.41468, 99.41),
        (99.996, 100.0),
        (12.346, 12.35),
        (-3.0, 0.0),
        (150.0, 100.0),
    ],
)
def test_round_percentage(value, expected):
    assert round_percentage(value) == expected
