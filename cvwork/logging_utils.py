"""
Logging helpers for cvwork.

Defines the package logger and simple utilities for configuring
console and optional file logging.
"""

from __future__ import annotations

import logging
from typing import List, Optional

LOG = logging.getLogger("cvwork")

# Verbosity levels
VERBOSITY_QUIET = 0    # Warnings and errors only (default)
VERBOSITY_NORMAL = 1   # Progress messages
VERBOSITY_VERBOSE = 2  # Detailed debug output


def _level_for(verbosity: int) -> int:
    if verbosity >= VERBOSITY_VERBOSE:
        return logging.DEBUG
    if verbosity >= VERBOSITY_NORMAL:
        return logging.INFO
    return logging.WARNING


def _console_formatter(verbosity: int) -> logging.Formatter:
    if verbosity >= VERBOSITY_NORMAL:
        return logging.Formatter("%(levelname)s: %(message)s")
    return logging.Formatter("%(message)s")


def setup_logging(debug: bool, log_file: Optional[str] = None, verbosity: int = VERBOSITY_QUIET) -> int:
    """
    Setup logging with verbosity control.

    Args:
        debug: Forces VERBOSITY_VERBOSE when set
        log_file: Optional log file path
        verbosity: Verbosity level (0=quiet, 1=normal, 2=verbose)

    Returns:
        The effective console log level
    """
    if debug:
        verbosity = VERBOSITY_VERBOSE
    level = _level_for(verbosity)

    # Handlers may already be configured (e.g. by pytest); reuse them
    if logging.root.handlers:
        for handler in logging.root.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(level)
                handler.setFormatter(_console_formatter(verbosity))
        logging.root.setLevel(level)
    else:
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(_console_formatter(verbosity))
        logging.basicConfig(level=level, handlers=[console], force=True)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # always full detail in file
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logging.root.addHandler(file_handler)
        # The file always gets DEBUG records, so the root must let them through
        logging.root.setLevel(logging.DEBUG)

    # docxtpl renders through jinja2, which is chatty at DEBUG
    logging.getLogger("jinja2").setLevel(logging.WARNING)
    return level


def fmt_issues(errors: List[str], warnings: List[str]) -> str:
    """
    Compact error/warning string for the one-line status log.
    """
    parts: List[str] = []
    if errors:
        parts.append("errors: " + ", ".join(errors))
    if warnings:
        parts.append("warnings: " + ", ".join(warnings))
    return " | ".join(parts) if parts else "-"
