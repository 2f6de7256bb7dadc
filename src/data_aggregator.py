"""
Data Aggregator
===============
Builds the engine's input records from raw tracker rows and loads those
rows from PostgreSQL for one user and one window.

Tables read (all filtered by user_id and start of window):
  meals           date | created_at, calories, protein, carbs, fats
  exercise_sets   created_at, weight_kg, reps, session_id
  user_fluids     date | consumed_at, amount_ml
  sleep_tracking  date, hours, quality_score
  weight_history  date, weight, body_fat_percentage
  workouts        date, did_workout, steps

Scales produced:
  • sleep_score      0-10  (quality_score, else hours / 8h x 10)
  • hydration_score  0-10  (fluids / 2500 ml x 10)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional, Tuple

from analytics.models import (
    DailyMetricRecord,
    SimpleWorkout,
    SleepSample,
    WeightSample,
    WorkoutDay,
    WorkoutSession,
    WorkoutSet,
)
from constants import FLUID_REFERENCE_ML, SLEEP_REFERENCE_HOURS
from db_utils import as_date, fetch_all, get_conn_str

log = logging.getLogger("data_aggregator")

Row = Dict[str, Any]


def _num(value: Any, default: float = 0.0) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _row_date(row: Row, *keys: str) -> Optional[date]:
    for key in keys:
        d = as_date(row.get(key))
        if d is not None:
            return d
    return None


def sleep_score_from_row(row: Row) -> float:
    quality = row.get("quality_score")
    if quality is not None:
        return min(10.0, _num(quality))
    return min(10.0, _num(row.get("hours")) / SLEEP_REFERENCE_HOURS * 10)


def hydration_score_from_ml(total_ml: float) -> float:
    return min(10.0, total_ml / FLUID_REFERENCE_ML * 10)


# ─── Raw rows → records ────────────────────────────────────


def build_daily_records(meals: Iterable[Row],
                        exercise_sets: Iterable[Row] = (),
                        fluids: Iterable[Row] = (),
                        sleep_rows: Iterable[Row] = ()) -> List[DailyMetricRecord]:
    """One record per date that has meals, sets or fluids, ascending.

    Sleep rows only annotate dates that already exist.
    """
    totals: Dict[date, Dict[str, float]] = {}

    def bucket(d: date) -> Dict[str, float]:
        return totals.setdefault(d, {
            "calories": 0.0, "protein": 0.0, "carbs": 0.0, "fats": 0.0,
            "volume": 0.0, "fluids_ml": 0.0,
        })

    skipped = 0
    for meal in meals:
        d = _row_date(meal, "date", "created_at")
        if d is None:
            skipped += 1
            continue
        b = bucket(d)
        b["calories"] += _num(meal.get("calories"))
        b["protein"] += _num(meal.get("protein"))
        b["carbs"] += _num(meal.get("carbs"))
        b["fats"] += _num(meal.get("fats"))

    for s in exercise_sets:
        d = _row_date(s, "created_at", "date")
        if d is None:
            skipped += 1
            continue
        bucket(d)["volume"] += _num(s.get("weight_kg")) * _num(s.get("reps"))

    for fluid in fluids:
        d = _row_date(fluid, "date", "consumed_at")
        if d is None:
            skipped += 1
            continue
        bucket(d)["fluids_ml"] += _num(fluid.get("amount_ml"))

    sleep_by_day = {}
    for row in sleep_rows:
        d = _row_date(row, "date")
        if d is not None:
            sleep_by_day[d] = sleep_score_from_row(row)

    if skipped:
        log.debug("Skipped %d raw rows without a usable date", skipped)

    return [
        DailyMetricRecord(
            date=d,
            total_calories=b["calories"],
            total_protein=b["protein"],
            total_carbs=b["carbs"],
            total_fats=b["fats"],
            workout_volume=b["volume"],
            sleep_score=sleep_by_day.get(d, 0.0),
            hydration_score=hydration_score_from_ml(b["fluids_ml"]),
        )
        for d, b in sorted(totals.items())
    ]


def build_weight_history(rows: Iterable[Row]) -> List[WeightSample]:
    out = []
    for row in rows:
        d = _row_date(row, "date")
        if d is None or row.get("weight") is None:
            continue
        bf = row.get("body_fat_percentage")
        out.append(WeightSample(d, _num(row["weight"]), None if bf is None else _num(bf)))
    return sorted(out, key=lambda w: w.date)


def build_sleep_samples(rows: Iterable[Row]) -> List[SleepSample]:
    out = []
    for row in rows:
        d = _row_date(row, "date")
        if d is None:
            continue
        q = row.get("quality_score")
        out.append(SleepSample(d, _num(row.get("hours")), None if q is None else _num(q)))
    return sorted(out, key=lambda s: s.date)


def build_workout_days(exercise_sets: Iterable[Row],
                       workouts: Iterable[Row] = ()) -> List[WorkoutDay]:
    """Group sets into sessions (by session_id, else one per day) and attach simple workouts."""
    sessions: Dict[date, Dict[Any, List[WorkoutSet]]] = {}
    for s in exercise_sets:
        d = _row_date(s, "created_at", "date")
        if d is None:
            continue
        key = s.get("session_id") or d.isoformat()
        sessions.setdefault(d, {}).setdefault(key, []).append(
            WorkoutSet(weight_kg=_num(s.get("weight_kg")), reps=int(_num(s.get("reps"))))
        )

    simple: Dict[date, List[SimpleWorkout]] = {}
    for w in workouts:
        d = _row_date(w, "date", "created_at")
        if d is None:
            continue
        simple.setdefault(d, []).append(
            SimpleWorkout(did_workout=bool(w.get("did_workout")), steps=int(_num(w.get("steps"))))
        )

    days = sorted(set(sessions) | set(simple))
    return [
        WorkoutDay(
            date=d,
            sessions=tuple(WorkoutSession(tuple(sets)) for sets in sessions.get(d, {}).values()),
            simple_workouts=tuple(simple.get(d, [])),
        )
        for d in days
    ]


# ─── PostgreSQL loader ─────────────────────────────────────


@dataclass(frozen=True)
class AnalyticsInputs:
    window: int
    daily_records: List[DailyMetricRecord] = field(default_factory=list)
    weight_history: List[WeightSample] = field(default_factory=list)
    sleep_samples: List[SleepSample] = field(default_factory=list)
    workout_days: List[WorkoutDay] = field(default_factory=list)


_QUERIES: Dict[str, Tuple[str, str]] = {
    # name: (table, date column)
    "weights": ("weight_history", "date"),
    "sleep": ("sleep_tracking", "date"),
    "meals": ("meals", "date"),
    "sets": ("exercise_sets", "created_at"),
    "fluids": ("user_fluids", "date"),
    "workouts": ("workouts", "date"),
}


class AnalyticsDataLoader:
    """Fetches one user's raw rows for a window and builds engine inputs."""

    def __init__(self, conn_str: Optional[str] = None):
        self.conn_str = conn_str or get_conn_str()

    def _rows(self, name: str, user_id: str, start: date) -> List[Row]:
        table, date_col = _QUERIES[name]
        return fetch_all(
            self.conn_str,
            f"SELECT * FROM {table} WHERE user_id = %s AND {date_col} >= %s ORDER BY {date_col} ASC",
            (user_id, start),
        )

    def load(self, user_id: str, window: int, as_of: Optional[date] = None) -> AnalyticsInputs:
        if not self.conn_str:
            raise RuntimeError("POSTGRES_CONNECTION_STRING is not set")
        start = (as_of or date.today()) - timedelta(days=window)
        raw = {name: self._rows(name, user_id, start) for name in _QUERIES}
        log.info(
            "Loaded %s rows for user %s since %s",
            ", ".join(f"{len(v)} {k}" for k, v in raw.items()), user_id, start,
        )
        return AnalyticsInputs(
            window=window,
            daily_records=build_daily_records(raw["meals"], raw["sets"], raw["fluids"], raw["sleep"]),
            weight_history=build_weight_history(raw["weights"]),
            sleep_samples=build_sleep_samples(raw["sleep"]),
            workout_days=build_workout_days(raw["sets"], raw["workouts"]),
        )
