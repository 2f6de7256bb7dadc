"""Predictive, pattern and optimisation insights derived from engine outputs."""

from __future__ import annotations

from typing import List, Optional, Sequence

from analytics.health_score import round_half_up
from analytics.models import (
    CorrelationResult,
    CorrelationTrend,
    HealthScore,
    Insight,
    InsightType,
    Significance,
    WeightSample,
)
from constants import (
    ACTIONABLE_PROJECTION_KG,
    CONSISTENCY_TIP_BELOW,
    CONSISTENCY_TIP_CONFIDENCE,
    HYDRATION_TIP_BELOW,
    HYDRATION_TIP_CONFIDENCE,
    MIN_WEIGHT_SAMPLES_FOR_PREDICTION,
    PROJECTION_DAYS,
    WEIGHT_TREND_MIN_SLOPE,
    WEIGHT_TREND_SAMPLES,
)


def weight_goal_prediction(weight_history: Sequence[WeightSample]) -> Optional[Insight]:
    if len(weight_history) < MIN_WEIGHT_SAMPLES_FOR_PREDICTION:
        return None
    recent = sorted(weight_history, key=lambda w: w.date)[-WEIGHT_TREND_SAMPLES:]
    # Divides by the sample count, not the elapsed days between samples.
    slope = (recent[-1].weight - recent[0].weight) / WEIGHT_TREND_SAMPLES
    if abs(slope) <= WEIGHT_TREND_MIN_SLOPE:
        return None

    projection = slope * PROJECTION_DAYS
    return Insight(
        type=InsightType.GOAL_PREDICTION,
        title="Weight trend forecast",
        description=f"At the current trend: {projection:+.1f}kg in {PROJECTION_DAYS} days",
        confidence=min(90, 50 + 8 * len(recent)),
        actionable=abs(projection) > ACTIONABLE_PROJECTION_KG,
    )


def strong_correlation_pattern(correlations: Sequence[CorrelationResult]) -> Optional[Insight]:
    strong = [c for c in correlations if c.significance == Significance.STRONG]
    if not strong:
        return None
    top = strong[0]
    direction = "positive" if top.trend == CorrelationTrend.POSITIVE else "negative"
    return Insight(
        type=InsightType.PATTERN_DETECTION,
        title="Strong correlation detected",
        description=(
            f"{top.metric1} and {top.metric2} show a {direction} correlation "
            f"({top.correlation * 100:.0f}%)"
        ),
        confidence=round_half_up(abs(top.correlation) * 100),
        actionable=True,
    )


def optimization_tips(health_score: HealthScore) -> List[Insight]:
    if health_score.days_evaluated == 0:
        return []
    tips: List[Insight] = []
    if health_score.consistency < CONSISTENCY_TIP_BELOW:
        tips.append(Insight(
            type=InsightType.OPTIMIZATION_TIP,
            title="Improve consistency",
            description="Logging every day makes these analyses up to 40% more accurate",
            confidence=CONSISTENCY_TIP_CONFIDENCE,
            actionable=True,
        ))
    if health_score.hydration < HYDRATION_TIP_BELOW:
        tips.append(Insight(
            type=InsightType.OPTIMIZATION_TIP,
            title="Optimise hydration",
            description="Drinking more water could lift your energy and performance by 15-20%",
            confidence=HYDRATION_TIP_CONFIDENCE,
            actionable=True,
        ))
    return tips


def generate_insights(weight_history: Sequence[WeightSample],
                      correlations: Sequence[CorrelationResult],
                      health_score: HealthScore) -> List[Insight]:
    """Goal prediction, then pattern detection, then tips; empty when nothing triggers."""
    results: List[Insight] = []
    for insight in (weight_goal_prediction(weight_history),
                    strong_correlation_pattern(correlations)):
        if insight is not None:
            results.append(insight)
    results.extend(optimization_tips(health_score))
    return results
