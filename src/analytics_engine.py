"""
Analytics Engine
================
Turns one user's per-day records for a 7/14/30-day window into:

  Correlations  — Pearson pairs (weight/calories, sleep/training,
                  hydration/energy, protein/training).
  Health Score  — nutrition, training, recovery, hydration, consistency
                  and an overall score with a week-over-week trend.
  Insights      — weight forecast, strong-correlation pattern, tips.
  Performance   — best training weekdays and recovery profile.
  Metabolic     — kcal per kg of weight change.

Pure and synchronous: no I/O, no state between calls.  Data fetching is
done upstream (see data_aggregator.AnalyticsDataLoader).
"""

from __future__ import annotations

import logging
from typing import Sequence

from analytics.correlation import compute_correlations
from analytics.health_score import calculate_health_score
from analytics.insights import generate_insights
from analytics.metabolic import estimate_metabolic_profile
from analytics.models import (
    AnalyticsResult,
    DailyMetricRecord,
    Significance,
    SleepSample,
    WeightSample,
    WorkoutDay,
)
from analytics.performance import analyze_performance
from constants import ALLOWED_WINDOWS

log = logging.getLogger("analytics_engine")


class AnalyticsError(Exception):
    """Base class for analytics contract violations."""


class InvalidWindowError(AnalyticsError, ValueError):
    """Requested window is not one of ALLOWED_WINDOWS."""


def validate_window(window: int) -> int:
    if isinstance(window, bool) or window not in ALLOWED_WINDOWS:
        raise InvalidWindowError(
            f"window must be one of {ALLOWED_WINDOWS}, got {window!r}"
        )
    return int(window)


def compute_analytics(window: int,
                      daily_records: Sequence[DailyMetricRecord],
                      weight_history: Sequence[WeightSample],
                      sleep_samples: Sequence[SleepSample],
                      workout_days: Sequence[WorkoutDay]) -> AnalyticsResult:
    """Run every analytics step over the same window and bundle the outputs."""
    window = validate_window(window)

    daily = sorted(daily_records, key=lambda d: d.date)
    weights = sorted(weight_history, key=lambda w: w.date)
    sleep = sorted(sleep_samples, key=lambda s: s.date)
    workouts = sorted(workout_days, key=lambda w: w.date)

    correlations = compute_correlations(daily, weights)
    health_score = calculate_health_score(daily)
    insights = generate_insights(weights, correlations, health_score)
    performance = analyze_performance(workouts, sleep, window)
    metabolic = estimate_metabolic_profile(daily, weights, health_score)

    log.info(
        "\n   ANALYTICS DIGEST (%d-day window)\n"
        "   Inputs        : %d daily, %d weight, %d sleep, %d workout days\n"
        "   Correlations  : %d pairs (%d strong)\n"
        "   Health score  : %d overall, trend %s\n"
        "   Insights      : %d\n"
        "   Best days     : %s\n"
        "   Efficiency    : %d kcal/kg",
        window,
        len(daily), len(weights), len(sleep), len(workouts),
        len(correlations),
        sum(1 for c in correlations if c.significance == Significance.STRONG),
        health_score.overall, health_score.trend.value,
        len(insights),
        ", ".join(d.value for d in performance.best_training_days) or "-",
        metabolic.efficiency,
    )

    return AnalyticsResult(
        window_days=window,
        correlations=correlations,
        health_score=health_score,
        insights=insights,
        performance_patterns=performance,
        metabolic_profile=metabolic,
    )
