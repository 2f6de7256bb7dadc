"""
Tests for the composite health score.

Covers: sub-score scaling, dual-scale hydration, consistency counting,
non-zero overall averaging, week-over-week trend and score bounds.
"""
from datetime import date, timedelta

import numpy as np
import pytest

from analytics.health_score import (
    calculate_health_score,
    calorie_score,
    normalize_hydration,
    round_half_up,
    score_band,
)
from analytics.models import DailyMetricRecord, HealthScore, ScoreTrend


class TestEmptyWindow:

    def test_all_zero_and_stable(self):
        hs = calculate_health_score([])
        assert hs == HealthScore()
        assert hs.overall == 0
        assert hs.trend == ScoreTrend.STABLE
        assert hs.days_evaluated == 0


class TestSubScores:

    def test_nutrition_scenario(self, make_days):
        """2000 kcal and 120 g protein: calorie ≈ 61.5, protein capped at 100."""
        hs = calculate_health_score(make_days(7, total_calories=2000, total_protein=120))
        assert calorie_score(2000) == pytest.approx(61.538, abs=0.01)
        assert 80 <= hs.nutrition <= 81

    def test_calorie_band_clamped(self):
        assert calorie_score(1000) == 0.0
        assert calorie_score(1200) == 0.0
        assert calorie_score(2500) == 100.0
        assert calorie_score(10_000) == 100.0

    def test_extreme_intake_caps_nutrition(self, make_days):
        hs = calculate_health_score(make_days(7, total_calories=10_000, total_protein=500))
        assert hs.nutrition == 100

    def test_training_scaled_against_2000kg(self, make_days):
        assert calculate_health_score(make_days(7, workout_volume=1000)).training == 50
        assert calculate_health_score(make_days(7, workout_volume=9000)).training == 100

    def test_recovery_from_sleep_score(self, make_days):
        assert calculate_health_score(make_days(7, sleep_score=7.5)).recovery == 75
        assert calculate_health_score(make_days(7, sleep_score=12)).recovery == 100

    def test_consistency_three_of_seven(self, make_days):
        days = make_days(7, total_calories=[600, 0, 500, 100, 0, 2000, 499])
        assert calculate_health_score(days).consistency == 43

    def test_consistency_uses_seven_day_denominator(self, make_days):
        # Two logged days out of a two-record window still count against 7
        assert calculate_health_score(make_days(2, total_calories=1500)).consistency == 29

    def test_only_last_seven_days_scored(self, make_days):
        volumes = [4000] * 7 + [0] * 7
        assert calculate_health_score(make_days(14, workout_volume=volumes)).training == 0


class TestHydration:

    def test_ten_point_scale_multiplied(self):
        assert normalize_hydration(6) == 60
        assert normalize_hydration(10) == 100

    def test_hundred_point_scale_kept(self):
        assert normalize_hydration(75) == 75
        assert normalize_hydration(10.5) == 10.5

    def test_capped(self):
        assert normalize_hydration(250) == 100

    def test_applied_to_window_average(self, make_days):
        assert calculate_health_score(make_days(7, hydration_score=4)).hydration == 40
        assert calculate_health_score(make_days(7, hydration_score=80)).hydration == 80


class TestOverall:

    def test_zero_subscores_excluded(self, make_days):
        days = make_days(7, total_calories=2500, total_protein=100, sleep_score=5)
        hs = calculate_health_score(days)
        assert (hs.nutrition, hs.training, hs.recovery, hs.hydration, hs.consistency) == (100, 0, 50, 0, 100)
        assert hs.overall == 83

    def test_all_zero_overall_zero(self, make_days):
        assert calculate_health_score(make_days(7)).overall == 0


class TestTrend:

    def test_no_prior_window_is_stable(self, make_days):
        assert calculate_health_score(make_days(7, total_calories=2500)).trend == ScoreTrend.STABLE

    def test_improving(self, make_days):
        cal = [1200] * 7 + [2500] * 7
        prot = [0] * 7 + [100] * 7
        hs = calculate_health_score(make_days(14, total_calories=cal, total_protein=prot, sleep_score=5))
        assert hs.trend == ScoreTrend.IMPROVING

    def test_declining(self, make_days):
        cal = [2500] * 7 + [1300] * 7
        prot = [100] * 7 + [20] * 7
        vol = [2000] * 7 + [0] * 7
        hs = calculate_health_score(make_days(14, total_calories=cal, total_protein=prot, workout_volume=vol))
        assert hs.trend == ScoreTrend.DECLINING

    def test_stable_within_ten_points(self, make_days):
        hs = calculate_health_score(make_days(
            14, total_calories=2500, total_protein=100, workout_volume=2000,
            sleep_score=10, hydration_score=10,
        ))
        assert hs.overall == 100
        assert hs.trend == ScoreTrend.STABLE


class TestBounds:

    def test_random_inputs_stay_in_range(self):
        rng = np.random.default_rng(11)
        start = date(2026, 1, 1)
        for _ in range(30):
            n = int(rng.integers(1, 30))
            days = [
                DailyMetricRecord(
                    date=start + timedelta(days=i),
                    total_calories=float(rng.uniform(0, 10_000)),
                    total_protein=float(rng.uniform(0, 400)),
                    workout_volume=float(rng.uniform(0, 20_000)),
                    sleep_score=float(rng.uniform(0, 10)),
                    hydration_score=float(rng.uniform(0, 100)),
                )
                for i in range(n)
            ]
            hs = calculate_health_score(days)
            for v in (hs.overall, hs.nutrition, hs.training, hs.recovery, hs.hydration, hs.consistency):
                assert isinstance(v, int)
                assert 0 <= v <= 100


class TestHelpers:

    def test_round_half_up(self):
        assert round_half_up(42.5) == 43
        assert round_half_up(80.5) == 81
        assert round_half_up(42.49) == 42

    @pytest.mark.parametrize("score,band", [
        (100, "excellent"), (80, "excellent"), (79, "good"), (60, "good"), (59, "needs_attention"), (0, "needs_attention"),
    ])
    def test_score_band(self, score, band):
        assert score_band(score) == band
