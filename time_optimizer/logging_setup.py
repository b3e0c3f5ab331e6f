"""Logging configuration for the planner script and demo UI."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int | str = logging.INFO) -> None:
    """Route all records to stderr. Call once, before the first log call."""

    root = logging.getLogger()
    root.setLevel(level)

    # avoid duplicate output on repeated calls (e.g. streamlit reruns)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    root.addHandler(handler)
    logging.captureWarnings(True)
