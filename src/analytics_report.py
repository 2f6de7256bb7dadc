"""
Analytics Report — one user's window from the database
=======================================================
Loads raw rows, runs the analytics engine and prints the three-bullet
summary (optionally the full JSON result).

Usage:
    python analytics_report.py --user-id <uuid>             # 30-day window
    python analytics_report.py --user-id <uuid> --days 7
    python analytics_report.py --user-id <uuid> --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

import config
from analytics_engine import compute_analytics
from constants import ALLOWED_WINDOWS
from data_aggregator import AnalyticsDataLoader
from pipeline.summary_builder import build_concise_summary

log = logging.getLogger("analytics_report")


def run(user_id: str, days: int, as_json: bool = False,
        loader: Optional[AnalyticsDataLoader] = None) -> int:
    """Print the report; return a process exit code."""
    try:
        inputs = (loader or AnalyticsDataLoader()).load(user_id, days)
        result = compute_analytics(
            inputs.window,
            inputs.daily_records,
            inputs.weight_history,
            inputs.sleep_samples,
            inputs.workout_days,
        )
    except Exception:
        log.exception("Analytics report for user %s failed", user_id)
        return 1

    print(build_concise_summary(result))
    if as_json:
        print(json.dumps(result.to_dict(), indent=2))
    return 0


# ═══════════════════════════════════════════════════════════════
#  CLI
# ═══════════════════════════════════════════════════════════════

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Health analytics report")
    parser.add_argument("--user-id", required=True,
                        help="User whose records are analysed")
    parser.add_argument("--days", type=int, default=config.DEFAULT_WINDOW,
                        choices=ALLOWED_WINDOWS,
                        help=f"Window in days (default: {config.DEFAULT_WINDOW})")
    parser.add_argument("--json", action="store_true",
                        help="Also print the full result as JSON")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s  %(levelname)-8s  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return run(args.user_id, args.days, as_json=args.json)


if __name__ == "__main__":
    sys.exit(main())
