"""Tests for the analytics report CLI (loader mocked)."""
import json
from datetime import date

import pytest

import analytics_report as report_mod
from analytics.models import DailyMetricRecord
from data_aggregator import AnalyticsInputs


class FakeLoader:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def load(self, user_id, window, as_of=None):
        self.calls.append((user_id, window))
        if self.fail:
            raise RuntimeError("db down")
        return AnalyticsInputs(
            window=window,
            daily_records=[DailyMetricRecord(date(2026, 2, 2), total_calories=2100, total_protein=110)],
        )


class TestRun:

    def test_prints_summary(self, capsys):
        loader = FakeLoader()
        assert report_mod.run("user-1", 7, loader=loader) == 0
        out = capsys.readouterr().out
        assert out.startswith("- What changed:")
        assert loader.calls == [("user-1", 7)]

    def test_json_output(self, capsys):
        assert report_mod.run("user-1", 14, as_json=True, loader=FakeLoader()) == 0
        out = capsys.readouterr().out
        payload = json.loads(out[out.index("{"):])
        assert payload["window_days"] == 14

    def test_failure_returns_1(self):
        assert report_mod.run("user-1", 30, loader=FakeLoader(fail=True)) == 1


class TestMain:

    def test_rejects_unsupported_days(self):
        with pytest.raises(SystemExit):
            report_mod.main(["--user-id", "u", "--days", "10"])

    def test_main_passes_arguments(self, monkeypatch):
        seen = {}

        def fake_run(user_id, days, as_json=False, loader=None):
            seen.update(user_id=user_id, days=days, as_json=as_json)
            return 0

        monkeypatch.setattr(report_mod, "run", fake_run)
        assert report_mod.main(["--user-id", "u", "--days", "7", "--json"]) == 0
        assert seen == {"user_id": "u", "days": 7, "as_json": True}
