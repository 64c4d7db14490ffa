import logging
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Tuple

import requests

from .intervals import Interval

logger = logging.getLogger(__name__)

STATIONS_HEADER = "[Stations]"
REPORTS_HEADER = "[Charger Availability Reports]"

DEFAULT_TIMEOUT = 30

_FLAGS = {"true": True, "false": False}

StationChargerMap = Dict[int, List[int]]
ChargerReportMap = Dict[int, List[Interval]]
NumberedLine = Tuple[int, str]


class UptimeInputError(Exception):
    """Base class for errors raised while loading uptime input."""


class InputNotFoundError(UptimeInputError, FileNotFoundError):
    """The input source does not exist."""


class MalformedInputError(UptimeInputError, ValueError):
    """The input source exists but its content cannot be parsed."""

    def __init__(self, message: str, line_number: int | None = None, line: str | None = None):
        if line_number is not None:
            message = f"line {line_number}: {message}: {line!r}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_text(source: str | Path, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Read the input document from a local file or an HTTP(S) URL."""
    if isinstance(source, str) and _is_url(source):
        logger.debug("Fetching input from %s", source)
        resp = requests.get(source, timeout=timeout)
        if resp.status_code == 404:
            raise InputNotFoundError(f"Input not found: {source}")
        resp.raise_for_status()
        logger.debug("Fetched %d bytes from remote", len(resp.content))
        return resp.text
    path = Path(source)
    logger.debug("Loading input from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise InputNotFoundError(f"Could not open file: {path}") from exc
    except IsADirectoryError as exc:
        raise InputNotFoundError(f"Not a file: {path}") from exc
    logger.debug("Loaded %d characters from file", len(text))
    return text


def _parse_id(token: str, what: str, number: int, line: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise MalformedInputError(f"invalid {what} {token!r}", number, line)
    return int(token)


def parse_stations(lines: Iterable[NumberedLine]) -> StationChargerMap:
    """Parse ``<station> <charger>...`` lines."""
    stations: StationChargerMap = {}
    for number, line in lines:
        tokens = line.split()
        station = _parse_id(tokens[0], "station id", number, line)
        chargers = stations.setdefault(station, [])
        for token in tokens[1:]:
            chargers.append(_parse_id(token, "charger id", number, line))
    logger.debug("Parsed %d stations", len(stations))
    return stations


def parse_reports(lines: Iterable[NumberedLine]) -> ChargerReportMap:
    """Parse ``<charger> <start> <end> <true|false>`` lines."""
    reports: ChargerReportMap = {}
    count = 0
    for number, line in lines:
        tokens = line.split()
        if len(tokens) != 4:
            raise MalformedInputError(
                f"expected 4 fields, got {len(tokens)}", number, line
            )
        charger = _parse_id(tokens[0], "charger id", number, line)
        start = _parse_id(tokens[1], "start time", number, line)
        end = _parse_id(tokens[2], "end time", number, line)
        flag = _FLAGS.get(tokens[3].lower())
        if flag is None:
            raise MalformedInputError(f"invalid up flag {tokens[3]!r}", number, line)
        if end < start:
            raise MalformedInputError("end time precedes start time", number, line)
        reports.setdefault(charger, []).append(Interval(start, end, flag))
        count += 1
    logger.debug("Parsed %d availability reports for %d chargers", count, len(reports))
    return reports


def _split_sections(text: str) -> Dict[str, List[NumberedLine]]:
    sections: Dict[str, List[NumberedLine]] = {}
    current: List[NumberedLine] | None = None
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("["):
            if line not in (STATIONS_HEADER, REPORTS_HEADER):
                raise MalformedInputError("unknown section header", number, line)
            if line in sections:
                raise MalformedInputError("duplicate section header", number, line)
            current = sections[line] = []
            continue
        if current is None:
            raise MalformedInputError("data before section header", number, line)
        current.append((number, line))
    return sections


def parse_input(text: str) -> Tuple[StationChargerMap, ChargerReportMap]:
    """Split the document into its two sections and parse both."""
    sections = _split_sections(text)
    if STATIONS_HEADER not in sections:
        raise MalformedInputError(f"missing {STATIONS_HEADER} section")
    stations = parse_stations(sections[STATIONS_HEADER])
    reports = parse_reports(sections.get(REPORTS_HEADER, ()))
    return stations, reports


def load_input(
    source: str | Path, timeout: float = DEFAULT_TIMEOUT
) -> Tuple[StationChargerMap, ChargerReportMap]:
    return parse_input(fetch_text(source, timeout=timeout))


def known_chargers(stations: StationChargerMap) -> Sequence[int]:
    return sorted({c for chargers in stations.values() for c in chargers})
