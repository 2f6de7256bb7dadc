"""Tests for the metabolic profile estimator."""
from datetime import date, timedelta

import pytest

from analytics.metabolic import (
    caloric_efficiency,
    efficiency_label,
    estimate_metabolic_profile,
    weight_change,
)
from analytics.models import HealthScore, WeightSample

START = date(2026, 2, 2)


def _weights(*values):
    return [WeightSample(START + timedelta(days=i), w) for i, w in enumerate(values)]


class TestEfficiency:

    def test_zero_change_defaults_to_7700(self, make_days):
        days = make_days(7, total_calories=2000)
        assert sum(d.total_calories for d in days) == 14000
        assert caloric_efficiency(days, _weights(80.0, 80.5, 80.0)) == 7700

    def test_no_weights_defaults_to_7700(self, make_days):
        assert caloric_efficiency(make_days(7, total_calories=2000), []) == 7700
        assert caloric_efficiency(make_days(7, total_calories=2000), _weights(80.0)) == 7700

    def test_kcal_per_kg_of_change(self, make_days):
        days = make_days(7, total_calories=2000)
        assert caloric_efficiency(days, _weights(80.0, 82.0)) == 7000
        assert caloric_efficiency(days, _weights(82.0, 80.0)) == 7000

    def test_uses_first_and_last_by_date(self):
        samples = list(reversed(_weights(80.0, 90.0, 81.0)))
        assert weight_change(samples) == pytest.approx(1.0)


class TestProfile:

    def test_placeholders_and_hydration_impact(self, make_days):
        profile = estimate_metabolic_profile(
            make_days(7, total_calories=2000), [], HealthScore(hydration=65, days_evaluated=7)
        )
        assert profile.efficiency == 7700
        assert (profile.macro_sensitivity.protein,
                profile.macro_sensitivity.carbs,
                profile.macro_sensitivity.fats) == (0.8, 0.6, 0.4)
        assert profile.hydration_impact == pytest.approx(0.65)


class TestLabels:

    @pytest.mark.parametrize("efficiency,label", [
        (5999, "very_efficient"),
        (6000, "efficient"),
        (7700, "efficient"),
        (8000, "less_efficient"),
    ])
    def test_efficiency_label(self, efficiency, label):
        assert efficiency_label(efficiency) == label
