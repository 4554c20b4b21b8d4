"""Logging configuration for Jules MCP."""

import logging
import sys


def setup_logging(level: str = "INFO", debug: bool = False) -> None:
    """Send logs to stderr; stdout carries the MCP stdio protocol."""
    log_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)

    if debug:
        log_format = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
    else:
        log_format = "%(asctime)s | %(levelname)-8s | %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
