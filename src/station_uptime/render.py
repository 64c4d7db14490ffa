from typing import List, Dict, Any, Mapping
import json
import logging

logger = logging.getLogger(__name__)

# One line per station, ascending by id
LINE_TEMPLATE = "{station} {percentage}"


def render_lines(result: Mapping[int, int]) -> List[str]:
    """Return ``"<station> <percentage>"`` lines sorted by station id."""
    return [
        LINE_TEMPLATE.format(station=station, percentage=result[station])
        for station in sorted(result)
    ]


def render_text(result: Mapping[int, int]) -> str:
    lines = render_lines(result)
    logger.debug("Rendered %d result lines", len(lines))
    return "".join(line + "\n" for line in lines)


def render_json(summary: List[Dict[str, Any]]) -> str:
    """Return the station summary as a JSON document."""
    return json.dumps({"stations": summary}, indent=2) + "\n"
