# ======================================================================
#  File......: main.py
#  Purpose...: Single entrypoint: build the mock dataset and print a summary
#  Version...: 0.4.0
#  Date......: 2026-03-09
#  Author....: Edwin Rodriguez (Arthrex IT SAP COE)
# ======================================================================

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

import pandas as pd

from config import CONFIG_PATH, load_settings
from dashboard_data import DashboardData, build_dashboard_data
from models import TIER_KEYS, TIME_WINDOWS
from mock_api import get_aggregated_data, get_error_analysis_data

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def summary_frame(data: DashboardData, tiers: List[str], windows: List[str]) -> pd.DataFrame:
    rows = []
    for tier in tiers:
        for window in windows:
            counts = get_aggregated_data(data, tier, window).to_dict()
            errors = get_error_analysis_data(data, tier, window)
            rows.append({"tier": tier, "window": window, **counts, "errors": sum(errors.values())})
    return pd.DataFrame(rows)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate the mock ETL job monitor dataset.")
    p.add_argument("--config", default=CONFIG_PATH, help="ini file with a [mockdata] section")
    p.add_argument("--seed", type=int, default=None, help="override the random seed")
    p.add_argument("--tier", choices=TIER_KEYS, help="only show one tier")
    p.add_argument("--window", choices=TIME_WINDOWS, help="only show one time window")
    p.add_argument("--log-level", default="INFO", type=str.upper, choices=LOG_LEVELS)
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args.config)
    except ValueError as e:
        print(f"Invalid configuration in {args.config}: {e}", file=sys.stderr)
        return 2

    if args.seed is not None:
        settings = replace(settings, seed=args.seed)

    data = build_dashboard_data(settings=settings)

    tiers = [args.tier] if args.tier else list(TIER_KEYS)
    windows = [args.window] if args.window else list(TIME_WINDOWS)
    df = summary_frame(data, tiers, windows)

    print(f"Mock dataset generated at {data.now.isoformat()} ({len(data.jobs)} jobs)")
    print(df.to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
