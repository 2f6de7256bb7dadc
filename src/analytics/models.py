"""Value records consumed and produced by the analytics engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


# ─── Enumerations ──────────────────────────────────────────────


class Weekday(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def from_date(cls, d: date) -> "Weekday":
        return _WEEKDAY_ORDER[d.weekday()]

    def localized(self, locale: str = "en") -> str:
        names = _WEEKDAY_NAMES.get(locale.split("-")[0].lower())
        if names is None:
            return self.value
        return names[self]


_WEEKDAY_ORDER = list(Weekday)

_WEEKDAY_NAMES: Dict[str, Dict[Weekday, str]] = {
    "en": {d: d.value for d in Weekday},
    "de": {
        Weekday.MONDAY: "Montag",
        Weekday.TUESDAY: "Dienstag",
        Weekday.WEDNESDAY: "Mittwoch",
        Weekday.THURSDAY: "Donnerstag",
        Weekday.FRIDAY: "Freitag",
        Weekday.SATURDAY: "Samstag",
        Weekday.SUNDAY: "Sonntag",
    },
}


class MetricPair(str, Enum):
    WEIGHT_CALORIES = "weight_calories"
    SLEEP_TRAINING = "sleep_training"
    HYDRATION_ENERGY = "hydration_energy"
    PROTEIN_TRAINING = "protein_training"


class Significance(str, Enum):
    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"


class CorrelationTrend(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class ScoreTrend(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


class InsightType(str, Enum):
    GOAL_PREDICTION = "goal_prediction"
    PATTERN_DETECTION = "pattern_detection"
    OPTIMIZATION_TIP = "optimization_tip"


# ─── Inputs ────────────────────────────────────────────────────


@dataclass(frozen=True)
class DailyMetricRecord:
    date: date
    total_calories: float = 0.0
    total_protein: float = 0.0
    total_carbs: float = 0.0
    total_fats: float = 0.0
    workout_volume: float = 0.0   # Σ weight_kg x reps
    sleep_score: float = 0.0      # 0-10
    hydration_score: float = 0.0  # 0-10 or 0-100, see normalize_hydration


@dataclass(frozen=True)
class WeightSample:
    date: date
    weight: float
    body_fat_percentage: Optional[float] = None


@dataclass(frozen=True)
class SleepSample:
    date: date
    hours: float
    quality_score: Optional[float] = None


@dataclass(frozen=True)
class WorkoutSet:
    weight_kg: float = 0.0
    reps: int = 0


@dataclass(frozen=True)
class WorkoutSession:
    sets: Tuple[WorkoutSet, ...] = ()

    @property
    def volume(self) -> float:
        return sum(s.weight_kg * s.reps for s in self.sets)


@dataclass(frozen=True)
class SimpleWorkout:
    did_workout: bool = False
    steps: int = 0


@dataclass(frozen=True)
class WorkoutDay:
    date: date
    sessions: Tuple[WorkoutSession, ...] = ()
    simple_workouts: Tuple[SimpleWorkout, ...] = ()

    @property
    def volume(self) -> float:
        return sum(s.volume for s in self.sessions)

    @property
    def has_sets(self) -> bool:
        """True when at least one advanced session logged a set."""
        return any(s.sets for s in self.sessions)


# ─── Outputs ───────────────────────────────────────────────────


@dataclass(frozen=True)
class CorrelationResult:
    metric1: str
    metric2: str
    correlation: float
    significance: Significance
    trend: CorrelationTrend
    pair: MetricPair
    n: int = 0


@dataclass(frozen=True)
class HealthScore:
    overall: int = 0
    nutrition: int = 0
    training: int = 0
    recovery: int = 0
    hydration: int = 0
    consistency: int = 0
    trend: ScoreTrend = ScoreTrend.STABLE
    days_evaluated: int = 0


@dataclass(frozen=True)
class Insight:
    type: InsightType
    title: str
    description: str
    confidence: int
    actionable: bool


@dataclass(frozen=True)
class MealTiming:
    time: str
    impact: int


@dataclass(frozen=True)
class RecoveryProfile:
    avg_sleep_for_good_workout: float
    training_frequency: float
    optimal_rest_days: int


@dataclass(frozen=True)
class PerformancePattern:
    best_training_days: Tuple[Weekday, ...]
    optimal_meal_timing: Tuple[MealTiming, ...]
    recovery_pattern: RecoveryProfile


@dataclass(frozen=True)
class MacroSensitivity:
    protein: float
    carbs: float
    fats: float


@dataclass(frozen=True)
class MetabolicProfile:
    efficiency: int
    macro_sensitivity: MacroSensitivity
    hydration_impact: float


@dataclass(frozen=True)
class AnalyticsResult:
    window_days: int
    correlations: List[CorrelationResult] = field(default_factory=list)
    health_score: HealthScore = field(default_factory=HealthScore)
    insights: List[Insight] = field(default_factory=list)
    performance_patterns: Optional[PerformancePattern] = None
    metabolic_profile: Optional[MetabolicProfile] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe dict (enums become their string values)."""
        return _jsonable(asdict(self))


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, date):
        return value.isoformat()
    return value
