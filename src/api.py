"""
FastAPI surface for the analytics engine.

POST /api/v1/analytics/compute   — caller supplies the window's records.
GET  /api/v1/analytics/{user_id} — records loaded from PostgreSQL.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Dict, List, Literal, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

import config
from analytics.health_score import score_band
from analytics.metabolic import efficiency_label
from analytics.models import (
    AnalyticsResult,
    DailyMetricRecord,
    SimpleWorkout,
    SleepSample,
    WeightSample,
    WorkoutDay,
    WorkoutSession,
    WorkoutSet,
)
from analytics.performance import localized_day_names
from analytics_engine import InvalidWindowError, compute_analytics, validate_window
from data_aggregator import AnalyticsDataLoader
from pipeline.summary_builder import build_concise_summary

log = logging.getLogger("api")


# ─── App setup ─────────────────────────────────────────────

app = FastAPI(title="Health Analytics API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.FRONTEND_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# ─── Request models ────────────────────────────────────────

class DailyRecordIn(BaseModel):
    date: dt.date
    total_calories: float = 0.0
    total_protein: float = 0.0
    total_carbs: float = 0.0
    total_fats: float = 0.0
    workout_volume: float = 0.0
    sleep_score: float = 0.0
    hydration_score: float = 0.0


class WeightIn(BaseModel):
    date: dt.date
    weight: float
    body_fat_percentage: Optional[float] = None


class SleepIn(BaseModel):
    date: dt.date
    hours: float
    quality_score: Optional[float] = None


class WorkoutSetIn(BaseModel):
    weight_kg: float = 0.0
    reps: int = 0


class WorkoutSessionIn(BaseModel):
    sets: List[WorkoutSetIn] = Field(default_factory=list)


class SimpleWorkoutIn(BaseModel):
    did_workout: bool = False
    steps: int = 0


class WorkoutDayIn(BaseModel):
    date: dt.date
    sessions: List[WorkoutSessionIn] = Field(default_factory=list)
    simple_workouts: List[SimpleWorkoutIn] = Field(default_factory=list)


class AnalyticsRequest(BaseModel):
    window: Literal[7, 14, 30] = 30
    daily_records: List[DailyRecordIn] = Field(default_factory=list)
    weight_history: List[WeightIn] = Field(default_factory=list)
    sleep_samples: List[SleepIn] = Field(default_factory=list)
    workout_days: List[WorkoutDayIn] = Field(default_factory=list)


def _workout_day(w: WorkoutDayIn) -> WorkoutDay:
    return WorkoutDay(
        date=w.date,
        sessions=tuple(
            WorkoutSession(tuple(WorkoutSet(s.weight_kg, s.reps) for s in session.sets))
            for session in w.sessions
        ),
        simple_workouts=tuple(SimpleWorkout(s.did_workout, s.steps) for s in w.simple_workouts),
    )


def _payload(result: AnalyticsResult, locale: str) -> Dict[str, Any]:
    out = result.to_dict()
    days = result.performance_patterns.best_training_days if result.performance_patterns else ()
    out["labels"] = {
        "health_band": score_band(result.health_score.overall),
        "efficiency": efficiency_label(result.metabolic_profile.efficiency)
        if result.metabolic_profile else None,
        "best_training_days": localized_day_names(days, locale),
    }
    out["summary"] = build_concise_summary(result)
    return out


def _loader() -> AnalyticsDataLoader:
    return AnalyticsDataLoader()


# ─── Routes ────────────────────────────────────────────────

@app.get("/")
def root() -> Dict[str, Any]:
    return {"service": "health-analytics-api", "status": "ok"}


@app.post("/api/v1/analytics/compute")
def analytics_compute(req: AnalyticsRequest, locale: str = Query(default="en")) -> Dict[str, Any]:
    result = compute_analytics(
        req.window,
        [DailyMetricRecord(**r.model_dump()) for r in req.daily_records],
        [WeightSample(**w.model_dump()) for w in req.weight_history],
        [SleepSample(**s.model_dump()) for s in req.sleep_samples],
        [_workout_day(w) for w in req.workout_days],
    )
    return _payload(result, locale)


@app.get("/api/v1/analytics/{user_id}")
def analytics_for_user(
    user_id: str,
    days: int = Query(default=config.DEFAULT_WINDOW),
    locale: str = Query(default="en"),
) -> Dict[str, Any]:
    try:
        window = validate_window(days)
        inputs = _loader().load(user_id, window)
        result = compute_analytics(
            inputs.window,
            inputs.daily_records,
            inputs.weight_history,
            inputs.sleep_samples,
            inputs.workout_days,
        )
        return _payload(result, locale)
    except InvalidWindowError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        log.exception("Analytics for user %s failed", user_id)
        raise HTTPException(status_code=500, detail=str(e))
