"""Metabolic efficiency: kcal consumed per kg of body-weight change."""

from __future__ import annotations

from typing import Sequence

from analytics.health_score import round_half_up
from analytics.models import (
    DailyMetricRecord,
    HealthScore,
    MacroSensitivity,
    MetabolicProfile,
    WeightSample,
)
from constants import (
    EFFICIENCY_EFFICIENT_BELOW,
    EFFICIENCY_VERY_EFFICIENT_BELOW,
    KCAL_PER_KG,
    MACRO_SENSITIVITY,
)


def weight_change(weight_history: Sequence[WeightSample]) -> float:
    if len(weight_history) < 2:
        return 0.0
    ordered = sorted(weight_history, key=lambda w: w.date)
    return ordered[-1].weight - ordered[0].weight


def caloric_efficiency(daily_records: Sequence[DailyMetricRecord],
                       weight_history: Sequence[WeightSample]) -> int:
    change = weight_change(weight_history)
    if change == 0:
        return KCAL_PER_KG
    total_calories = sum(d.total_calories for d in daily_records)
    return round_half_up(total_calories / abs(change))


def estimate_metabolic_profile(daily_records: Sequence[DailyMetricRecord],
                               weight_history: Sequence[WeightSample],
                               health_score: HealthScore) -> MetabolicProfile:
    return MetabolicProfile(
        efficiency=caloric_efficiency(daily_records, weight_history),
        macro_sensitivity=MacroSensitivity(**MACRO_SENSITIVITY),
        hydration_impact=health_score.hydration / 100,
    )


def efficiency_label(efficiency: float) -> str:
    # 7700 kcal/kg is the textbook value; lower means more weight change per kcal
    if efficiency < EFFICIENCY_VERY_EFFICIENT_BELOW:
        return "very_efficient"
    if efficiency < EFFICIENCY_EFFICIENT_BELOW:
        return "efficient"
    return "less_efficient"
