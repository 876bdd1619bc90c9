"""Lightweight logging setup for the command line."""

import argparse
import logging
import os
import sys

LOG_LEVEL_ENV = "CREDKDF_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def level_from_env(default: str = "WARNING") -> str:
    return os.environ.get(LOG_LEVEL_ENV, default).upper()


def parse_log_level(value: str) -> str:
    level = value.upper()
    if level not in LOG_LEVELS:
        raise argparse.ArgumentTypeError(f"invalid log level {value!r}, expected one of {', '.join(LOG_LEVELS)}")
    return level


def configure_logging(level: int | str = logging.WARNING) -> None:
    # Configure root logger once; stdout is reserved for command output.
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
