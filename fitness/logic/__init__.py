"""Core business logic layer.

Subpackages:
- recommendation: goal-to-plan policy
- reporting: calorie breakdowns for plans
"""
__all__ = ["recommendation", "reporting"]
