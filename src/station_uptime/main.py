import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List

from .analyze import aggregate, summarize
from .config import OUTPUT_FORMATS, load_settings
from .data import InputNotFoundError, MalformedInputError, known_chargers, load_input
from .render import render_json, render_text
from .logging_utils import setup_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute the uptime percentage of each charging station",
    )
    parser.add_argument(
        "source",
        nargs="?",
        help="Input file path or http(s) URL (default: STATION_UPTIME_SOURCE)",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        help="Output format (default: STATION_UPTIME_FORMAT or text)",
    )
    parser.add_argument("--output", type=Path, help="Write results to a file instead of stdout")
    parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds to wait when fetching a URL (default: STATION_UPTIME_TIMEOUT or 30)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: List[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    settings = load_settings()

    setup_logging(args.debug or settings.debug)

    source = args.source or settings.source
    if not source:
        parser.error("an input source or STATION_UPTIME_SOURCE must be provided")
    timeout = args.timeout if args.timeout is not None else settings.timeout
    output_format = args.output_format or settings.output_format

    start = time.monotonic()
    logger.info("Reading input from %s", source)
    try:
        stations, reports = load_input(source, timeout=timeout)
    except (InputNotFoundError, MalformedInputError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc

    unlisted = sorted(set(reports) - set(known_chargers(stations)))
    if unlisted:
        logger.warning(
            "Ignoring reports for %d chargers not assigned to a station", len(unlisted)
        )

    if output_format == "json":
        output = render_json(summarize(stations, reports))
    else:
        output = render_text(aggregate(stations, reports))

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output, encoding="utf-8")
        logger.info("Wrote results to %s", args.output)
    else:
        sys.stdout.write(output)
    logger.debug("Computed uptime for %d stations in %.3fs", len(stations), time.monotonic() - start)


if __name__ == "__main__":
    main()
