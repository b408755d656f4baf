"""
Settings read from the process environment.
"""
from collections.abc import Mapping
import logging
import os
from typing import ReadOnly, TypedDict

LOG_LEVEL_VAR = "PYAPPLICATIVE_LOG_LEVEL"
REPORT_WIDTH_VAR = "PYAPPLICATIVE_REPORT_WIDTH"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_REPORT_WIDTH = 80
MIN_REPORT_WIDTH = 40

class Settings(TypedDict):
    """
    Package-wide settings
    """
    log_level: ReadOnly[str]
    report_width: ReadOnly[int]

def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Builds Settings from environment variables, falling back to defaults.
    Raises ValueError for a value that cannot be used.
    """
    env = os.environ if environ is None else environ
    level = env.get(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL).strip().upper()
    if level not in logging.getLevelNamesMapping():
        raise ValueError(f"{LOG_LEVEL_VAR}: unknown log level {level!r}")
    raw_width = env.get(REPORT_WIDTH_VAR, str(DEFAULT_REPORT_WIDTH))
    try:
        width = int(raw_width)
    except ValueError as exc:
        raise ValueError(f"{REPORT_WIDTH_VAR}: not an integer: "
                         f"{raw_width!r}") from exc
    if width < MIN_REPORT_WIDTH:
        raise ValueError(f"{REPORT_WIDTH_VAR}: must be at least "
                         f"{MIN_REPORT_WIDTH}, got {width}")
    return {
        "log_level": level,
        "report_width": width,
    }
