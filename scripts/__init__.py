"""Command-line entry points for csrgraph."""

import logging
import os

# Configuration via environment variables
LOG_LEVEL = os.environ.get("CSRGRAPH_LOG_LEVEL", "WARNING")


def _resolve_level(name: str) -> int:
    """Numeric level for ``name``; unknown names fall back to WARNING."""
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    logging.getLogger(__name__).warning(
        "Unknown CSRGRAPH_LOG_LEVEL %r, using WARNING", name
    )
    return logging.WARNING


def configure_logging(verbose: bool = False) -> None:
    """Send library log records to stderr; ``--verbose`` forces DEBUG."""
    level = logging.DEBUG if verbose else _resolve_level(LOG_LEVEL)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
