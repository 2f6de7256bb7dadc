"""
Shared constants used across the analytics modules.
Single source of truth for scoring references, correlation thresholds
and the static placeholder tables.
"""

# Health score references
CALORIE_BAND = (1200.0, 2500.0)      # kcal/day mapped linearly to 0-100
PROTEIN_REFERENCE_G = 100.0          # g/day = 100 points
VOLUME_REFERENCE_KG = 2000.0         # kg/day (weight x reps) = 100 points
MEANINGFUL_DAY_KCAL = 500.0          # a day with >= this many kcal counts as logged
SCORE_WINDOW_DAYS = 7
TREND_DELTA_POINTS = 10.0

# Hydration values at or below this are on the 0-10 scale
HYDRATION_TEN_POINT_MAX = 10.0

# Score bands used by the dashboards
SCORE_BAND_EXCELLENT = 80
SCORE_BAND_GOOD = 60

# Insight triggers
MIN_WEIGHT_SAMPLES_FOR_PREDICTION = 6
WEIGHT_TREND_SAMPLES = 5
WEIGHT_TREND_MIN_SLOPE = 0.01        # kg/day
PROJECTION_DAYS = 30
ACTIONABLE_PROJECTION_KG = 2.0
CONSISTENCY_TIP_BELOW = 70
HYDRATION_TIP_BELOW = 60
CONSISTENCY_TIP_CONFIDENCE = 85
HYDRATION_TIP_CONFIDENCE = 75

# Recovery profile
DEFAULT_SLEEP_HOURS = 7.5
OPTIMAL_REST_DAYS = 1
BEST_DAYS_TOP_N = 3

# Metabolic profile
KCAL_PER_KG = 7700
EFFICIENCY_VERY_EFFICIENT_BELOW = 6000
EFFICIENCY_EFFICIENT_BELOW = 8000

# Placeholder: not derived from meal timestamps yet, replace once meal
# times are tracked per entry.
OPTIMAL_MEAL_TIMING = (
    ("07:00", 85),
    ("12:00", 90),
    ("18:00", 75),
)

# Placeholder: fixed coefficients until a regression over macro intake vs.
# weight change exists.
MACRO_SENSITIVITY = {"protein": 0.8, "carbs": 0.6, "fats": 0.4}

# Raw-row aggregation
FLUID_REFERENCE_ML = 2500.0          # ml/day = 10 on the 0-10 hydration scale
SLEEP_REFERENCE_HOURS = 8.0          # hours = 10 on the 0-10 sleep scale

ALLOWED_WINDOWS = (7, 14, 30)
