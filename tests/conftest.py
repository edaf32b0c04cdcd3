"""Pytest configuration and shared fixtures."""

import pytest
from unittest.mock import Mock

from parsing._records import LapRecord, SectorRecord

COLUMN_LABELS = ["LAP", "SECTOR 1", "KPH", "SECTOR 2", "KPH", "SECTOR 3", "KPH", "TIME"]

# lap number, time of day, grid speed, S2 time/speed, S3 time/speed | lap time
START_LAP = ["1", "14:03:12", "212.4", "35.120", "287.3", "28.450", "301.2", "1:45.810"]
# lap number, time of day, S1..S3 time/speed | lap time
NORMAL_LAP_2 = ["2", "14:04:58", "42.100", "250.1", "35.020", "288.0", "28.300", "302.5", "1:45.420"]
# lap number, pit marker, S2 time/speed, pit info, S3 time | lap time
PIT_LAP_3 = ["3", "P", "35.500", "287.9", "IN", "24.810", "52.300", "2:10.600"]
NORMAL_LAP_4 = ["4", "14:09:04", "41.950", "251.0", "34.870", "289.1", "28.120", "303.0", "1:44.940"]


def racer_header(number, name):
    return [number, name] + COLUMN_LABELS


@pytest.fixture
def jane_doe_laps():
    return START_LAP + NORMAL_LAP_2 + PIT_LAP_3 + NORMAL_LAP_4


@pytest.fixture
def two_racer_page(jane_doe_laps):
    """One page with two racers, the first with start, normal and pit laps."""
    return (
        ["Race Sector Analysis"]
        + racer_header("44", "Jane Doe")
        + jane_doe_laps
        + racer_header("16", "John Smith")
        + START_LAP
        + NORMAL_LAP_2
    )


@pytest.fixture
def laps_before_header_page():
    """Laps that appear before the header of the racer they belong to."""
    return ["Race Sector Analysis", "TIME"] + START_LAP + NORMAL_LAP_2 + ["44", "Jane Doe"]


@pytest.fixture
def sample_race_data():
    return {
        "Jane Doe": [
            LapRecord(lap=1, sectors=[
                SectorRecord(1, None, 212.4),
                SectorRecord(2, 35120, 287.3),
                SectorRecord(3, 28450, 301.2),
            ], lap_time_ms=105810),
            LapRecord(lap=2, sectors=[
                SectorRecord(1, 42100, 250.1),
                SectorRecord(2, 35020, 288.0),
                SectorRecord(3, 28300, 302.5),
            ]),
            LapRecord(lap=3, pit=True, sectors=[
                SectorRecord(2, 35500, 287.9),
                SectorRecord(3, 52300, None),
            ], lap_time_ms=130600),
            LapRecord(lap=4, sectors=[
                SectorRecord(1, 41950, 251.0),
                SectorRecord(2, 34870, 289.1),
                SectorRecord(3, 28120, 303.0),
            ], lap_time_ms=104940),
        ],
        "John Smith": [
            LapRecord(lap=1, sectors=[
                SectorRecord(1, 40000, 240.0),
                SectorRecord(2, 35000, 280.0),
                SectorRecord(3, 28000, 300.0),
            ]),
        ],
    }


def mock_page(lines):
    """Stand-in for a PyMuPDF page whose dict text has one span per line."""
    page = Mock()
    page.get_text.return_value = {
        "blocks": [
            {"lines": [{"spans": [{"text": text}]} for text in lines]},
            {"type": 1},  # image block, no lines
        ]
    }
    return page
