"""
Shared test configuration.

Adds src/ to sys.path so flat modules (analytics_engine, data_aggregator,
api, ...) and the analytics/pipeline packages import with plain
`import module_name`, and provides small record builders.
"""

import os
import sys
from datetime import date, timedelta

import pytest

_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_src_dir = os.path.join(_project_root, "src")

if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

from analytics.models import DailyMetricRecord  # noqa: E402


START = date(2026, 2, 2)  # a Monday


@pytest.fixture
def make_days():
    """Build consecutive DailyMetricRecords starting on START.

    Each keyword takes a list (one value per day) or a scalar (same every day).
    """
    def _make(n, **fields):
        out = []
        for i in range(n):
            values = {k: (v[i] if isinstance(v, (list, tuple)) else v) for k, v in fields.items()}
            out.append(DailyMetricRecord(date=START + timedelta(days=i), **values))
        return out
    return _make
