"""Schedule configuration from defaults, environment and explicit overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import fields, replace
from typing import Optional

from time_optimizer.schema import ScheduleConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "TIME_OPTIMIZER"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %d", name, raw, default)
        return default


def load_schedule_config(overrides: Optional[dict] = None) -> ScheduleConfig:
    """Build a ``ScheduleConfig``; explicit overrides win over the environment.

    Out-of-range values raise ``ValueError``.
    """

    defaults = ScheduleConfig()
    from_env = {f.name: _env_int(_k(f.name.upper()), getattr(defaults, f.name)) for f in fields(ScheduleConfig)}
    config = replace(defaults, **from_env)
    if overrides:
        config = replace(config, **overrides)
    return config


def log_level() -> str:
    return (os.getenv(_k("LOG_LEVEL")) or "INFO").strip().upper()
