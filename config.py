# ======================================================================
#  File......: config.py
#  Purpose...: Mock dataset settings (population sizes, windows, seed).
#  Version...: 0.1.0
#  Date......: 2026-03-09
#  Author....: Edwin Rodriguez (Arthrex IT SAP COE)
# ======================================================================

from __future__ import annotations

import os
import configparser
from dataclasses import dataclass
from typing import Optional


# ---------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------

HERE = os.path.abspath(os.path.dirname(__file__))
CONFIG_PATH = os.path.join(HERE, "mockdata_config.ini")
SECTION = "mockdata"
SEED_ENV_VAR = "JOBMON_MOCK_SEED"


@dataclass(frozen=True)
class MockSettings:
    today_job_count: int = 50
    week_job_count: int = 200
    month_job_count: int = 500

    today_window_days: int = 1
    week_window_days: int = 7
    month_window_days: int = 30

    seed: Optional[int] = None


_INT_KEYS = (
    "today_job_count",
    "week_job_count",
    "month_job_count",
    "today_window_days",
    "week_window_days",
    "month_window_days",
)


def _parse_int(key: str, raw: str) -> int:
    try:
        value = int(str(raw).strip())
    except ValueError:
        raise ValueError(f"Invalid integer for '{key}': {raw!r}") from None
    if value < 0:
        raise ValueError(f"'{key}' must not be negative (got {value})")
    return value


def load_settings(path: Optional[str] = None) -> MockSettings:
    """
    Read settings from the ini file (section [mockdata]).

    Missing file or keys fall back to the defaults. JOBMON_MOCK_SEED
    overrides the seed from the file.
    """
    path = path or CONFIG_PATH
    values = {}

    cfg = configparser.ConfigParser(interpolation=None)
    if os.path.exists(path):
        try:
            cfg.read(path)
        except configparser.Error as e:
            raise ValueError(f"Unreadable config file {path}: {e}") from e

    if SECTION in cfg:
        section = cfg[SECTION]
        for key in _INT_KEYS:
            if key in section:
                values[key] = _parse_int(key, section[key])
        seed = (section.get("seed") or "").strip()
        if seed:
            values["seed"] = _parse_int("seed", seed)

    env_seed = (os.environ.get(SEED_ENV_VAR) or "").strip()
    if env_seed:
        values["seed"] = _parse_int(SEED_ENV_VAR, env_seed)

    return MockSettings(**values)
