import pytest

import station_uptime.data as data
from station_uptime.intervals import Interval


def test_parse_input_sample(sample_text):
    stations, reports = data.parse_input(sample_text)
    assert stations == {0: [1001, 1002], 1: [1003], 2: [1004]}
    assert reports == {
        1001: [Interval(0, 50000, True), Interval(50000, 100000, True)],
        1002: [Interval(50000, 100000, True)],
        1003: [Interval(25000, 75000, False)],
        1004: [Interval(0, 50000, True), Interval(100000, 200000, True)],
    }


def test_parse_stations_accumulates_repeated_station():
    stations = data.parse_stations([(2, "0 1001"), (3, "0 1002 1001"), (4, "1")])
    assert stations == {0: [1001, 1002, 1001], 1: []}


def test_parse_reports_flag_is_case_insensitive():
    reports = data.parse_reports([(1, "7 0 10 TRUE"), (2, "7 10 20 False")])
    assert reports == {7: [Interval(0, 10, True), Interval(10, 20, False)]}


def test_parse_input_without_reports_section():
    stations, reports = data.parse_input("[Stations]\n0 1001\n")
    assert stations == {0: [1001]}
    assert reports == {}


def test_parse_input_tolerates_extra_blank_lines():
    text = "\n[Stations]\n0 1\n\n\n[Charger Availability Reports]\n\n1 0 10 true\n\n"
    stations, reports = data.parse_input(text)
    assert stations == {0: [1]}
    assert reports == {1: [Interval(0, 10, True)]}


def test_parse_stations_rejects_non_numeric_charger():
    with pytest.raises(data.MalformedInputError) as excinfo:
        data.parse_input("[Stations]\n0 100A\n")
    assert excinfo.value.line_number == 2
    assert excinfo.value.line == "0 100A"


@pytest.mark.parametrize(
    "line",
    [
        "1001 0 50000",
        "1001 0 50000 true extra",
        "1001 zero 50000 true",
        "1001 0 50000 maybe",
        "1001 -5 50000 true",
        "1001 50000 0 true",
    ],
)
def test_parse_reports_rejects_malformed_lines(line):
    text = f"[Stations]\n0 1001\n\n[Charger Availability Reports]\n{line}\n"
    with pytest.raises(data.MalformedInputError) as excinfo:
        data.parse_input(text)
    assert excinfo.value.line_number == 5


def test_parse_input_rejects_data_before_header():
    with pytest.raises(data.MalformedInputError):
        data.parse_input("0 1001\n[Stations]\n")


def test_parse_input_rejects_unknown_header():
    with pytest.raises(data.MalformedInputError):
        data.parse_input("[Stations]\n0 1001\n[Chargers]\n1001 0 1 true\n")


def test_parse_input_requires_stations_section():
    with pytest.raises(data.MalformedInputError):
        data.parse_input("[Charger Availability Reports]\n1001 0 1 true\n")


def test_malformed_input_is_value_error():
    assert issubclass(data.MalformedInputError, ValueError)
    assert issubclass(data.InputNotFoundError, FileNotFoundError)
    assert issubclass(data.MalformedInputError, data.UptimeInputError)
