"""Calorie aggregation for workout plans."""
from typing import Any, Dict

from fitness.domain.Plan import Plan
from fitness.domain.Profile import Profile


def compute_plan_calories(plan: Plan, profile: Profile) -> Dict[str, Any]:
    """Per-activity calorie breakdown for the given profile.

    Returns structure:
    {
      'activities': [ {'category': str, 'label': str, 'duration_minutes': int,
                       'intensity': int, 'calories': float}, ... ],
      'total_minutes': int,
      'total_calories': float
    }
    Calories are rounded to 2 decimals; the unrounded total is plan.total_calories(profile).
    """
    rows = []
    total = 0.0
    for activity in plan:
        cals = activity.estimate_calories(profile)
        total += cals
        rows.append({
            'category': activity.CATEGORY,
            'label': activity.label,
            'duration_minutes': activity.duration_minutes,
            'intensity': activity.intensity,
            'calories': round(cals, 2),
        })
    return {
        'activities': rows,
        'total_minutes': plan.total_minutes(),
        'total_calories': round(total, 2),
    }

__all__ = ["compute_plan_calories"]
