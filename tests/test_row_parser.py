from datetime import datetime

import pytest

from nesa2csv import REQUIRED_MEASUREMENTS, lookup_measurement, record_to_row
from nesa2csv.exceptions import InvalidRowError, InvalidTimestampError, RowParseError
from nesa2csv.row_parser import Record, is_data_line, parse_row, zero_pad

from conftest import SAMPLE_LINE


@pytest.mark.unit
@pytest.mark.parametrize("value,expected", [("5", "05"), ("05", "05"), ("12", "12"), ("", "")])
def test_zero_pad(value, expected):
    assert zero_pad(value) == expected


@pytest.mark.unit
def test_parse_row_station_and_timestamp(cutoff):
    record = parse_row(SAMPLE_LINE, cutoff)
    assert record.station_id == "12"
    assert record.timestamp == "2023-06-15T09:05:00"
    assert record.values == {
        "Temperature_Avg": "21.5",
        "Humidity_Avg": "65",
        "Rainfall_Acc": "0.4",
    }


@pytest.mark.unit
def test_parse_row_without_cutoff_keeps_raw_values():
    record = parse_row("S,0007,23,59,59,1,1,2020,1,2,*", None)
    assert record.station_id == "7"
    assert record.timestamp == "2020-01-01T23:59:59"
    assert record.values == {"Temperature_Avg": "*"}


@pytest.mark.unit
def test_parse_row_without_cutoff_skips_timestamp_validation():
    record = parse_row("S,1,xx,0,0,1,1,2020")
    assert record.timestamp == "2020-01-01Txx:00:00"


@pytest.mark.unit
def test_missing_marker_becomes_empty_with_cutoff(cutoff):
    record = parse_row("S,12,9,5,0,15,6,2023,1,2,*,2,2,70", cutoff)
    assert record.values["Temperature_Avg"] == ""
    row = record_to_row(record)
    assert row[2] == ""
    assert row[3] == "70"
    # Wind speed was never reported; same empty output, different cause
    assert row[4] == ""


@pytest.mark.unit
@pytest.mark.parametrize("line", ["S,12,9,5,0,15", "S", "S,12,9,5,0,15,6"])
def test_short_rows_are_invalid(line, cutoff):
    with pytest.raises(InvalidRowError) as excinfo:
        parse_row(line, cutoff)
    assert "invalid row" in str(excinfo.value)
    assert isinstance(excinfo.value, RowParseError)


@pytest.mark.unit
def test_bad_timestamp_with_cutoff(cutoff):
    with pytest.raises(InvalidTimestampError) as excinfo:
        parse_row("S,12,25,5,0,15,6,2023,1,2,21.5", cutoff)
    assert excinfo.value.timestamp == "2023-06-15T25:05:00"


@pytest.mark.unit
def test_record_before_cutoff_is_dropped():
    cutoff = datetime(2023, 6, 15, 9, 5, 1)
    assert parse_row(SAMPLE_LINE, cutoff) is None


@pytest.mark.unit
def test_record_at_cutoff_is_kept():
    cutoff = datetime(2023, 6, 15, 9, 5, 0)
    assert parse_row(SAMPLE_LINE, cutoff) is not None


@pytest.mark.unit
def test_unknown_ids_are_dropped(cutoff):
    record = parse_row("S,12,9,5,0,15,6,2023,99,2,1.0,1,9,2.0,1,3,18.0", cutoff)
    assert record.values == {"Temperature_Min": "18.0"}
    row = record_to_row(record)
    assert row[2:] == [""] * len(REQUIRED_MEASUREMENTS)


@pytest.mark.unit
def test_incomplete_trailing_triple_is_ignored(cutoff):
    record = parse_row("S,12,9,5,0,15,6,2023,1,2,21.5,2,2", cutoff)
    assert record.values == {"Temperature_Avg": "21.5"}


@pytest.mark.unit
def test_later_triple_overrides_earlier(cutoff):
    record = parse_row("S,12,9,5,0,15,6,2023,1,2,21.5,1,2,22.0", cutoff)
    assert record.values["Temperature_Avg"] == "22.0"


@pytest.mark.unit
def test_station_of_only_zeros_is_empty(cutoff):
    record = parse_row("S,000,9,5,0,15,6,2023", cutoff)
    assert record.station_id == ""
    assert record.values == {}


@pytest.mark.unit
def test_record_to_row_follows_required_order():
    record = Record(
        station_id="3",
        timestamp="2023-01-02T03:04:05",
        values={"Soiltemperature100_Avg": "4.1", "Windspeed_Max": "12.3", "Temperature_Max": "9"},
    )
    row = record_to_row(record)
    assert row[:2] == ["3", "2023-01-02T03:04:05"]
    assert len(row) == 2 + len(REQUIRED_MEASUREMENTS)
    assert row[2 + REQUIRED_MEASUREMENTS.index("Windspeed_Max")] == "12.3"
    assert row[-1] == "4.1"
    assert "9" not in row


@pytest.mark.unit
def test_lookup_measurement():
    assert lookup_measurement("4", "2") == "Wind Direction_Avg"
    assert lookup_measurement("10", "7") == "Rainfall_Acc"
    assert lookup_measurement("10", "2") is None
    assert lookup_measurement("7", "2") is None


@pytest.mark.unit
def test_is_data_line():
    assert is_data_line(SAMPLE_LINE)
    assert not is_data_line("H,header")
    assert not is_data_line("S;12")
    assert not is_data_line(" S,12")


@pytest.mark.unit
def test_non_ascii_digits_are_an_invalid_timestamp(cutoff):
    with pytest.raises(InvalidTimestampError):
        parse_row("S,12,9,5,0,15,6,٢٠٢٣,1,2,21.5", cutoff)
