"""
Tests for the summary builder module.

Covers: build_concise_summary defaults, insight selection and clipping.
"""
from datetime import date

from analytics.models import (
    AnalyticsResult,
    HealthScore,
    Insight,
    InsightType,
    MealTiming,
    PerformancePattern,
    RecoveryProfile,
    ScoreTrend,
    Weekday,
)
from pipeline.summary_builder import build_concise_summary


def _result(insights=(), **score):
    hs = dict(overall=72, nutrition=80, training=60, recovery=70, hydration=90,
              consistency=100, trend=ScoreTrend.IMPROVING, days_evaluated=7)
    hs.update(score)
    return AnalyticsResult(
        window_days=30,
        health_score=HealthScore(**hs),
        insights=list(insights),
        performance_patterns=PerformancePattern(
            best_training_days=(Weekday.TUESDAY, Weekday.FRIDAY),
            optimal_meal_timing=(MealTiming("07:00", 85),),
            recovery_pattern=RecoveryProfile(7.5, 3.0, 1),
        ),
    )


class TestBuildConciseSummary:

    def test_none_returns_defaults(self):
        result = build_concise_summary(None)
        assert "What changed" in result
        assert "Why it matters" in result
        assert "Next 24-48h" in result
        assert "Insufficient data" in result

    def test_no_days_evaluated_returns_defaults(self):
        assert "Insufficient data" in build_concise_summary(AnalyticsResult(window_days=7))

    def test_three_bullets(self):
        lines = build_concise_summary(_result()).strip().split("\n")
        assert len(lines) == 3
        assert lines[0].startswith("- What changed:")
        assert lines[1].startswith("- Why it matters:")
        assert lines[2].startswith("- Next 24-48h:")

    def test_score_and_trend_reported(self):
        first = build_concise_summary(_result()).split("\n")[0]
        assert "72/100" in first
        assert "good" in first
        assert "improving" in first

    def test_weakest_area_without_pattern(self):
        second = build_concise_summary(_result()).split("\n")[1]
        assert "training at 60/100" in second

    def test_insights_used_when_present(self):
        insights = [
            Insight(InsightType.GOAL_PREDICTION, "Weight trend forecast",
                    "At the current trend: -3.0kg in 30 days", 90, True),
            Insight(InsightType.PATTERN_DETECTION, "Strong correlation detected",
                    "Weight and Caloric intake show a positive correlation (85%)", 85, True),
            Insight(InsightType.OPTIMIZATION_TIP, "Optimise hydration",
                    "Drinking more water could lift your energy", 75, True),
        ]
        lines = build_concise_summary(_result(insights)).split("\n")
        assert "-3.0kg" in lines[0]
        assert "Caloric intake" in lines[1]
        assert "Optimise hydration" in lines[2]

    def test_best_days_when_no_tip(self):
        third = build_concise_summary(_result()).split("\n")[2]
        assert "Tuesday, Friday" in third

    def test_lines_clipped(self):
        long_tip = Insight(InsightType.OPTIMIZATION_TIP, "Tip", "x" * 600, 75, True)
        for line in build_concise_summary(_result([long_tip])).split("\n"):
            assert len(line) <= 280
