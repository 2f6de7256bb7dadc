"""Helpers for building concise analytics text for UI consumption."""

from __future__ import annotations

from typing import Optional

from analytics.health_score import score_band
from analytics.models import AnalyticsResult, InsightType

_NO_DATA = (
    "- What changed: Insufficient data in this window.\n"
    "- Why it matters: Scores and trends need at least a few logged days to mean anything.\n"
    "- Next 24-48h: Log meals, workouts and sleep daily and check back after a few days."
)


def clip(s: str, limit: int = 260) -> str:
    s = s.replace("\n", " ").strip()
    if len(s) <= limit:
        return s
    return s[: limit - 3].rstrip() + "..."


def bullet(label: str, value: str) -> str:
    prefix = f"- {label}: "
    allowed = max(48, 280 - len(prefix))
    return prefix + clip(value, allowed)


def build_concise_summary(result: Optional[AnalyticsResult]) -> str:
    """Create a strict 3-bullet, human-friendly summary for UI cards."""
    if result is None or result.health_score.days_evaluated == 0:
        return _NO_DATA

    hs = result.health_score
    by_type = {}
    for insight in result.insights:
        by_type.setdefault(insight.type, insight)

    what_changed = (
        f"Health score {hs.overall}/100 ({score_band(hs.overall).replace('_', ' ')}), "
        f"trend {hs.trend.value}."
    )
    forecast = by_type.get(InsightType.GOAL_PREDICTION)
    if forecast:
        what_changed += f" {forecast.description}."

    pattern = by_type.get(InsightType.PATTERN_DETECTION)
    if pattern:
        why_it_matters = pattern.description + "."
    else:
        subs = {
            "nutrition": hs.nutrition,
            "training": hs.training,
            "recovery": hs.recovery,
            "hydration": hs.hydration,
            "consistency": hs.consistency,
        }
        weakest = min(subs, key=subs.get)
        why_it_matters = f"Lowest area is {weakest} at {subs[weakest]}/100, which pulls the overall score down."

    tip = by_type.get(InsightType.OPTIMIZATION_TIP)
    if tip:
        next_24_48h = f"{tip.title}: {tip.description}."
    else:
        days = result.performance_patterns.best_training_days if result.performance_patterns else ()
        if days:
            next_24_48h = "Keep current habits; your strongest sessions fall on " + ", ".join(d.value for d in days) + "."
        else:
            next_24_48h = "Keep current habits and keep logging daily."

    return (
        f"{bullet('What changed', what_changed)}\n"
        f"{bullet('Why it matters', why_it_matters)}\n"
        f"{bullet('Next 24-48h', next_24_48h)}"
    )
