from fastapi import FastAPI, HTTPException, Response, Query
from typing import Optional
import logging

from fitness.domain.Plan import Plan
from fitness.domain.Profile import Profile
from fitness.events.activity_feed import start as start_activity_feed, get_events as get_feed_events
from fitness.infra.Session_Logger import SessionLogger
from fitness.infra.pdf_utils import generate_pdf_for_plan
from fitness.logic.recommendation.recommender import recommend, merge_with_extras, select_policy
from fitness.logic.reporting.calories import compute_plan_calories
from fitness.utilities.errors import FitnessError, InvalidDimension, InvalidParameter
from fitness.utilities.validators import (
    MergeInput,
    ProfileInput,
    RecommendInput,
    SessionInput,
)

# Logging
logger = logging.getLogger("fitness_app")

# Initialize FastAPI app
app = FastAPI(title="Fitness & Calorie Burn Planner API")

# Replaced in tests to point at a temporary file
session_logger = SessionLogger()


@app.on_event("startup")
def _startup_activity_feed():
    """Register the activity feed on the event bus when the app starts."""
    start_activity_feed()


# -------------------- Helpers --------------------
def _plan_payload(plan: Plan, profile: Profile) -> dict:
    """Activities, display lines and calorie report for a plan."""
    return {
        "count": len(plan),
        "activities": plan.to_dict(),
        "show": plan.show(),
        "report": compute_plan_calories(plan, profile),
    }


# -------------------- API --------------------
@app.get('/api/health')
def health():
    return {"status": "ok"}


@app.post('/api/bmi')
def api_bmi(payload: ProfileInput):
    profile = payload.to_profile()
    try:
        value = profile.bmi()
    except InvalidDimension as e:
        logger.warning("BMI failed for %s: %s", profile.name, e)
        raise HTTPException(status_code=400, detail=str(e))
    return {"name": profile.name, "bmi": round(value, 2)}


@app.post('/api/recommend')
def api_recommend(payload: RecommendInput):
    profile = payload.profile.to_profile()
    goal = payload.goal if payload.goal is not None else profile.goal
    plan = recommend(goal)
    body = _plan_payload(plan, profile)
    body.update({"goal": goal, "policy": select_policy(goal), "profile": profile.to_dict()})
    return body


@app.post('/api/recommend/pdf')
def api_recommend_pdf(payload: RecommendInput):
    profile = payload.profile.to_profile()
    goal = payload.goal if payload.goal is not None else profile.goal
    plan = recommend(goal)
    pdf_bytes = generate_pdf_for_plan(plan, profile)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="workout_plan.pdf"'},
    )


@app.post('/api/plans/merge')
def api_merge(payload: MergeInput):
    profile = payload.profile.to_profile()
    try:
        first = payload.first_plan()
        second = payload.second_plan()
    except InvalidParameter as e:
        raise HTTPException(status_code=400, detail=str(e))
    merged = merge_with_extras(first, second)
    return _plan_payload(merged, profile)


@app.post('/api/sessions')
def api_log_session(payload: SessionInput):
    profile = payload.profile.to_profile()
    try:
        activity = payload.activity.to_activity()
        line = session_logger.log_session(profile, activity, payload.calories)
    except InvalidParameter as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FitnessError as e:
        logger.error("Logging failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    return {"logged": line.rstrip("\n"), "info": activity.info()}


@app.get('/api/sessions')
def api_list_sessions(limit: Optional[int] = Query(default=None, ge=1)):
    try:
        lines = session_logger.read_sessions()
    except FitnessError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if limit is not None:
        lines = lines[-limit:]
    return {"count": len(lines), "sessions": lines}


@app.get('/api/events')
def api_events(since: Optional[int] = Query(default=None, ge=0)):
    """Recent plan and session activity; poll with since=<next_cursor>."""
    return get_feed_events(since)
