import logging
import sys


def setup_logging(debug: bool = False) -> None:
    """Configure logging on stderr so stdout only carries results."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
