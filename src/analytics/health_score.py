"""
Composite Health Score
======================
Five sub-scores (nutrition, training, recovery, hydration, consistency),
each normalised to 0-100, averaged into an overall score.

  • Current window = last 7 daily records, prior window = the 7 before.
  • Zero sub-scores are left out of the overall average.
  • Trend compares the current overall against a nutrition + training
    only score of the prior window (±10 points).
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from analytics.models import DailyMetricRecord, HealthScore, ScoreTrend
from constants import (
    CALORIE_BAND,
    HYDRATION_TEN_POINT_MAX,
    MEANINGFUL_DAY_KCAL,
    PROTEIN_REFERENCE_G,
    SCORE_BAND_EXCELLENT,
    SCORE_BAND_GOOD,
    SCORE_WINDOW_DAYS,
    TREND_DELTA_POINTS,
    VOLUME_REFERENCE_KG,
)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> float:
    return max(0.0, min(100.0, value))


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def normalize_hydration(value: float) -> float:
    """Map a hydration reading onto 0-100.

    Scale detection: a value <= 10 is read as the 0-10 scale and
    multiplied by 10; anything above 10 is taken as already 0-100.
    A genuine 0-100 reading of 10 or less is therefore inflated ten-fold.
    """
    if value <= HYDRATION_TEN_POINT_MAX:
        return clamp_score(value * 10)
    return clamp_score(value)


def calorie_score(avg_calories: float) -> float:
    low, high = CALORIE_BAND
    return clamp_score((avg_calories - low) / (high - low) * 100)


def protein_score(avg_protein: float) -> float:
    return clamp_score(avg_protein / PROTEIN_REFERENCE_G * 100)


def nutrition_score(records: Sequence[DailyMetricRecord]) -> float:
    cal = round_half_up(calorie_score(_mean([r.total_calories for r in records])))
    prot = round_half_up(protein_score(_mean([r.total_protein for r in records])))
    return max(0.0, (cal + prot) / 2)


def training_score(records: Sequence[DailyMetricRecord]) -> float:
    return clamp_score(_mean([r.workout_volume for r in records]) / VOLUME_REFERENCE_KG * 100)


def recovery_score(records: Sequence[DailyMetricRecord]) -> float:
    return clamp_score(_mean([r.sleep_score for r in records]) * 10)


def hydration_score(records: Sequence[DailyMetricRecord]) -> float:
    return normalize_hydration(_mean([r.hydration_score for r in records]))


def consistency_score(records: Sequence[DailyMetricRecord]) -> float:
    logged = sum(1 for r in records if r.total_calories >= MEANINGFUL_DAY_KCAL)
    return clamp_score(logged / SCORE_WINDOW_DAYS * 100)


def nonzero_mean(scores: Sequence[float]) -> float:
    valid = [s for s in scores if s > 0]
    return _mean(valid)


def score_trend(current_overall: float, prior_overall: Optional[float]) -> ScoreTrend:
    if prior_overall is None:
        return ScoreTrend.STABLE
    if current_overall - prior_overall > TREND_DELTA_POINTS:
        return ScoreTrend.IMPROVING
    if prior_overall - current_overall > TREND_DELTA_POINTS:
        return ScoreTrend.DECLINING
    return ScoreTrend.STABLE


def calculate_health_score(daily_records: Sequence[DailyMetricRecord]) -> HealthScore:
    if not daily_records:
        return HealthScore()

    ordered: List[DailyMetricRecord] = sorted(daily_records, key=lambda r: r.date)
    recent = ordered[-SCORE_WINDOW_DAYS:]
    prior = ordered[-2 * SCORE_WINDOW_DAYS:-SCORE_WINDOW_DAYS]

    subs = {
        "nutrition": nutrition_score(recent),
        "training": training_score(recent),
        "recovery": recovery_score(recent),
        "hydration": hydration_score(recent),
        "consistency": consistency_score(recent),
    }
    overall = nonzero_mean(list(subs.values()))

    prior_overall = None
    if prior:
        prior_overall = nonzero_mean([nutrition_score(prior), training_score(prior)])

    return HealthScore(
        overall=round_half_up(clamp_score(overall)),
        trend=score_trend(overall, prior_overall),
        days_evaluated=len(recent),
        **{k: round_half_up(clamp_score(v)) for k, v in subs.items()},
    )


def score_band(score: float) -> str:
    """Dashboard band for a 0-100 score."""
    if score >= SCORE_BAND_EXCELLENT:
        return "excellent"
    if score >= SCORE_BAND_GOOD:
        return "good"
    return "needs_attention"
