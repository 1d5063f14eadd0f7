"""Goal-based workout recommendation.

The goal text is matched case-insensitively against an ordered keyword list;
the first keyword found selects the plan, anything else gets the maintenance
plan. Every call builds new activities, so returned plans never share state.
"""
import logging
from typing import Callable, List, Optional, Tuple

from fitness.domain.Activity import Cardio, Flexibility, Strength
from fitness.domain.Plan import Plan
from fitness.domain.Profile import Profile
from fitness.events.Event_Bus import PLAN_MERGED, PLAN_RECOMMENDED, publish
from fitness.utilities.constants import GOAL_BUILD, GOAL_LOSE

logger = logging.getLogger(__name__)


def _lose_weight_plan() -> Plan:
    return Plan([
        Cardio("HIIT", 25, 9, 10.0),
        Strength("Full-body strength", 30, 7),
        Flexibility("Stretch", 15, 2),
    ])


def _build_muscle_plan() -> Plan:
    return Plan([
        Strength("Hypertrophy", 50, 8),
        Cardio("Light cardio", 20, 4, 5.5),
        Flexibility("Mobility", 20, 3),
    ])


def _maintain_plan() -> Plan:
    return Plan([
        Cardio("Steady-state", 30, 5, 6.0),
        Strength("Maintenance strength", 30, 5),
    ])


# Keyword doubles as the policy name; checked in order
POLICIES: List[Tuple[str, Callable[[], Plan]]] = [
    (GOAL_LOSE, _lose_weight_plan),
    (GOAL_BUILD, _build_muscle_plan),
]
DEFAULT_POLICY: Tuple[str, Callable[[], Plan]] = ("maintain", _maintain_plan)


def _match_policy(goal: Optional[str]) -> Tuple[str, Callable[[], Plan]]:
    text = (goal or "").lower()
    for keyword, builder in POLICIES:
        if keyword in text:
            return keyword, builder
    return DEFAULT_POLICY


def select_policy(goal: Optional[str]) -> str:
    """Name of the policy a goal maps to: 'lose', 'build' or 'maintain'."""
    return _match_policy(goal)[0]


def recommend(goal: Optional[str]) -> Plan:
    """Build a fresh plan for the goal text."""
    policy, builder = _match_policy(goal)
    plan = builder()
    logger.info("Recommended '%s' plan (%d activities) for goal %r", policy, len(plan), goal)
    publish(PLAN_RECOMMENDED, {"goal": goal, "policy": policy, "plan": plan})
    return plan


def recommend_for_profile(profile: Profile) -> Plan:
    return recommend(profile.goal)


def sample_plan() -> Plan:
    """General-purpose extras: a jog, a circuit and a yoga session."""
    return Plan([
        Cardio("Jogging", 30, 6, 7.0),
        Strength("Circuit training", 40, 7),
        Flexibility("Yoga", 20, 3),
    ])


def merge_with_extras(plan: Plan, extras: Optional[Plan] = None) -> Plan:
    """Merge plan with extras (the sample plan when omitted) into a new plan."""
    if extras is None:
        extras = sample_plan()
    merged = plan.merge(extras)
    logger.debug("Merged plans: %d + %d -> %d activities", len(plan), len(extras), len(merged))
    publish(PLAN_MERGED, {"plan": merged, "first": len(plan), "second": len(extras)})
    return merged


__all__ = ["recommend", "recommend_for_profile", "select_policy", "sample_plan", "merge_with_extras"]
