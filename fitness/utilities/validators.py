"""
Input validation schemas using Pydantic for the HTTP layer.
Each schema converts to its domain object.
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional

from fitness.domain.Activity import Activity
from fitness.domain.Plan import Plan
from fitness.domain.Profile import Profile
from fitness.utilities.constants import DEFAULT_GOAL, MAX_INTENSITY, MIN_INTENSITY, VALID_SEXES


class ProfileInput(BaseModel):
    """Schema for profile input validation."""
    name: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., ge=0, le=130)
    weight_kg: float = Field(..., gt=0, le=500)
    height_cm: float = Field(..., gt=0, le=300)
    sex: str = Field(..., min_length=1, max_length=1)
    goal: str = Field(DEFAULT_GOAL, max_length=200)

    @field_validator('name', 'goal')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace; control characters are rejected."""
        if isinstance(v, str):
            v = v.strip()
            if any(not ch.isprintable() for ch in v):
                raise ValueError('must not contain control characters')
        return v

    @field_validator('sex')
    @classmethod
    def validate_sex(cls, v):
        v = v.strip().upper()
        if v not in VALID_SEXES:
            raise ValueError(f"sex must be one of {', '.join(VALID_SEXES)}")
        return v

    def to_profile(self) -> Profile:
        return Profile.from_dict(self.model_dump())


class ActivityInput(BaseModel):
    """Schema for a single activity."""
    category: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1, max_length=100)
    duration_minutes: int = Field(..., ge=1, le=600)
    intensity: int = Field(..., ge=MIN_INTENSITY, le=MAX_INTENSITY)
    met_base: Optional[float] = Field(None, gt=0, le=30)

    @field_validator('category')
    @classmethod
    def validate_category(cls, v):
        v = v.strip().capitalize()
        if v not in ("Cardio", "Strength", "Flexibility"):
            raise ValueError('category must be Cardio, Strength or Flexibility')
        return v

    @field_validator('label')
    @classmethod
    def strip_label(cls, v):
        return v.strip()

    @model_validator(mode='after')
    def check_met_base(self):
        """Cardio needs its own MET value."""
        if self.category == "Cardio" and self.met_base is None:
            raise ValueError('met_base is required for Cardio activities')
        return self

    def to_activity(self) -> Activity:
        return Activity.from_dict(self.model_dump(exclude_none=True))


def _to_plan(items: List[ActivityInput]) -> Plan:
    return Plan.from_dict([item.model_dump(exclude_none=True) for item in items])


class RecommendInput(BaseModel):
    """Schema for a recommendation request; goal falls back to the profile's goal."""
    profile: ProfileInput
    goal: Optional[str] = Field(None, max_length=200)


class MergeInput(BaseModel):
    """Schema for merging two plans; second defaults to the sample plan."""
    profile: ProfileInput
    first: List[ActivityInput] = Field(default_factory=list)
    second: Optional[List[ActivityInput]] = None

    def first_plan(self) -> Plan:
        return _to_plan(self.first)

    def second_plan(self) -> Optional[Plan]:
        return _to_plan(self.second) if self.second is not None else None


class SessionInput(BaseModel):
    """Schema for logging a workout session."""
    profile: ProfileInput
    activity: ActivityInput
    calories: Optional[float] = Field(None, ge=0)
