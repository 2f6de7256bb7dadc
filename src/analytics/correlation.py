"""Pairwise Pearson correlations between daily health metrics."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Mapping, Sequence, Tuple

import numpy as np
import pandas as pd

from analytics.models import (
    CorrelationResult,
    CorrelationTrend,
    DailyMetricRecord,
    MetricPair,
    Significance,
    WeightSample,
)

log = logging.getLogger("correlation")


@dataclass(frozen=True)
class PairConfig:
    metric1: str
    metric2: str
    strong: float
    moderate: float


# Thresholds differ per pair; each pair keeps the cut-offs it has always
# been reported with.
PAIR_CONFIG: Dict[MetricPair, PairConfig] = {
    MetricPair.WEIGHT_CALORIES: PairConfig("Weight", "Caloric intake", 0.7, 0.4),
    MetricPair.SLEEP_TRAINING: PairConfig("Sleep quality", "Training volume", 0.6, 0.3),
    MetricPair.HYDRATION_ENERGY: PairConfig("Hydration", "Energy", 0.5, 0.3),
    MetricPair.PROTEIN_TRAINING: PairConfig("Protein intake", "Training volume", 0.6, 0.3),
}


def paired_values(x: Sequence[float], y: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    """Positional pairs up to the shorter series, minus pairs with a NaN."""
    n = min(len(x), len(y))
    xs = np.asarray(x, dtype=np.float64)[:n]
    ys = np.asarray(y, dtype=np.float64)[:n]
    mask = ~(np.isnan(xs) | np.isnan(ys))
    return xs[mask], ys[mask]


def pearson(x: Sequence[float], y: Sequence[float]) -> float:
    """Pearson r over positionally paired values.

    Pairs beyond the shorter series and pairs with a NaN are dropped.
    Fewer than 2 pairs, or a constant series, gives 0.0.
    """
    xs, ys = paired_values(x, y)
    n = len(xs)
    if n < 2 or np.all(xs == xs[0]) or np.all(ys == ys[0]):
        return 0.0

    sum_x, sum_y = xs.sum(), ys.sum()
    sum_xy = (xs * ys).sum()
    sum_xx, sum_yy = (xs * xs).sum(), (ys * ys).sum()

    numerator = n * sum_xy - sum_x * sum_y
    denominator_sq = (n * sum_xx - sum_x * sum_x) * (n * sum_yy - sum_y * sum_y)
    if denominator_sq <= 0:
        return 0.0
    r = numerator / np.sqrt(denominator_sq)
    return float(np.clip(r, -1.0, 1.0))


def align_by_date(left: Mapping[date, float],
                  right: Mapping[date, float]) -> Tuple[np.ndarray, np.ndarray]:
    """Inner-join two date-keyed series, ascending by date."""
    joined = pd.concat(
        {
            "x": pd.Series(dict(left), dtype="float64"),
            "y": pd.Series(dict(right), dtype="float64"),
        },
        axis=1,
        join="inner",
    ).sort_index()
    return joined["x"].to_numpy(), joined["y"].to_numpy()


def classify_significance(r: float, strong: float, moderate: float) -> Significance:
    magnitude = abs(r)
    if magnitude > strong:
        return Significance.STRONG
    if magnitude > moderate:
        return Significance.MODERATE
    return Significance.WEAK


def correlation_trend(r: float) -> CorrelationTrend:
    if r > 0:
        return CorrelationTrend.POSITIVE
    if r < 0:
        return CorrelationTrend.NEGATIVE
    return CorrelationTrend.NEUTRAL


def correlate_pair(pair: MetricPair, x: Sequence[float], y: Sequence[float]) -> CorrelationResult:
    cfg = PAIR_CONFIG[pair]
    r = pearson(x, y)
    return CorrelationResult(
        metric1=cfg.metric1,
        metric2=cfg.metric2,
        correlation=r,
        significance=classify_significance(r, cfg.strong, cfg.moderate),
        trend=correlation_trend(r),
        pair=pair,
        n=len(paired_values(x, y)[0]),
    )


def compute_correlations(daily_records: Sequence[DailyMetricRecord],
                         weight_history: Sequence[WeightSample]) -> List[CorrelationResult]:
    """Weight/calories (date-aligned) plus three same-day pairs from the daily records."""
    daily = sorted(daily_records, key=lambda d: d.date)
    results: List[CorrelationResult] = []

    weights = {w.date: w.weight for w in sorted(weight_history, key=lambda w: w.date)}
    calories = {d.date: d.total_calories for d in daily}
    w_vals, c_vals = align_by_date(weights, calories)
    if len(w_vals):
        results.append(correlate_pair(MetricPair.WEIGHT_CALORIES, w_vals, c_vals))
    else:
        log.debug("No weight samples share a date with the daily records")

    if daily:
        sleep = [d.sleep_score for d in daily]
        volume = [d.workout_volume for d in daily]
        hydration = [d.hydration_score for d in daily]
        protein = [d.total_protein for d in daily]
        results.append(correlate_pair(MetricPair.SLEEP_TRAINING, sleep, volume))
        results.append(correlate_pair(MetricPair.HYDRATION_ENERGY, hydration, sleep))
        results.append(correlate_pair(MetricPair.PROTEIN_TRAINING, protein, volume))

    return results
