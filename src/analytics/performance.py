"""Training-performance patterns: best weekdays and recovery profile."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import pandas as pd

from analytics.models import (
    MealTiming,
    PerformancePattern,
    RecoveryProfile,
    SleepSample,
    Weekday,
    WorkoutDay,
)
from constants import BEST_DAYS_TOP_N, DEFAULT_SLEEP_HOURS, OPTIMAL_MEAL_TIMING, OPTIMAL_REST_DAYS


def best_training_days(workout_days: Sequence[WorkoutDay],
                       top_n: int = BEST_DAYS_TOP_N) -> Tuple[Weekday, ...]:
    """Weekdays ranked by mean daily volume; ties keep first-seen order.

    Only days with logged sets are ranked, so simple-workout days do not
    dilute a weekday's mean.
    """
    ordered = [d for d in sorted(workout_days, key=lambda d: d.date) if d.has_sets]
    if not ordered:
        return ()
    frame = pd.DataFrame({
        "weekday": [Weekday.from_date(d.date).value for d in ordered],
        "volume": [d.volume for d in ordered],
    })
    means = frame.groupby("weekday", sort=False)["volume"].mean()
    ranked = means.sort_values(ascending=False, kind="stable")
    return tuple(Weekday(day) for day in ranked.index[:top_n])


def recovery_profile(sleep_samples: Sequence[SleepSample],
                     workout_days: Sequence[WorkoutDay],
                     window_days: int) -> RecoveryProfile:
    if sleep_samples:
        avg_sleep = sum(s.hours for s in sleep_samples) / len(sleep_samples)
    else:
        avg_sleep = DEFAULT_SLEEP_HOURS
    training_days = len({d.date for d in workout_days if d.has_sets})
    return RecoveryProfile(
        avg_sleep_for_good_workout=avg_sleep,
        training_frequency=training_days / window_days * 7,
        optimal_rest_days=OPTIMAL_REST_DAYS,
    )


def analyze_performance(workout_days: Sequence[WorkoutDay],
                        sleep_samples: Sequence[SleepSample],
                        window_days: int) -> PerformancePattern:
    return PerformancePattern(
        best_training_days=best_training_days(workout_days),
        optimal_meal_timing=tuple(MealTiming(t, i) for t, i in OPTIMAL_MEAL_TIMING),
        recovery_pattern=recovery_profile(sleep_samples, workout_days, window_days),
    )


def localized_day_names(days: Sequence[Weekday], locale: str = "en") -> List[str]:
    return [d.localized(locale) for d in days]
