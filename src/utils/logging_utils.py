"""Logging setup for test runs."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process.

    Raises:
        ValueError: If ``level`` is not a known logging level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)

    # Playwright's asyncio transport is chatty at DEBUG
    logging.getLogger("asyncio").setLevel(max(numeric_level, logging.INFO))
