from typing import Any, Dict, List, Mapping, Sequence
import logging

from .intervals import Interval, merge
from .stats import resolve, timeline_totals

logger = logging.getLogger(__name__)

StationChargers = Mapping[int, Sequence[int]]
ChargerReports = Mapping[int, Sequence[Interval]]


def station_intervals(
    chargers: Sequence[int], charger_reports: ChargerReports
) -> List[Interval]:
    """Flatten the reports of ``chargers`` in charger order, then report order."""
    intervals: List[Interval] = []
    for charger in chargers:
        intervals.extend(charger_reports.get(charger, ()))
    return intervals


def aggregate(
    station_chargers: StationChargers, charger_reports: ChargerReports
) -> Dict[int, int]:
    """Return ``station -> uptime percentage`` ordered by station id."""
    result: Dict[int, int] = {}
    logger.debug("Aggregating uptime for %d stations", len(station_chargers))
    for station in sorted(station_chargers):
        timeline = merge(station_intervals(station_chargers[station], charger_reports))
        result[station] = resolve(timeline)
        logger.debug("Station %s uptime %d%%", station, result[station])
    return result


def summarize(
    station_chargers: StationChargers, charger_reports: ChargerReports
) -> List[Dict[str, Any]]:
    """Per-station uptime together with the figures it was derived from."""
    summary: List[Dict[str, Any]] = []
    for station in sorted(station_chargers):
        chargers = station_chargers[station]
        timeline = merge(station_intervals(chargers, charger_reports))
        observed, available = timeline_totals(timeline)
        summary.append(
            {
                "station_id": station,
                "chargers": len(chargers),
                "reporting_chargers": sum(1 for c in chargers if charger_reports.get(c)),
                "first_report": timeline[0].start if timeline else None,
                "last_report": timeline[-1].end if timeline else None,
                "observed_seconds": observed,
                "available_seconds": available,
                "uptime_pct": resolve(timeline),
            }
        )
    logger.debug("Summarized %d stations", len(summary))
    return summary
