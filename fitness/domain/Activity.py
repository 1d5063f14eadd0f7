"""Activity domain entities: Cardio, Strength and Flexibility with a MET-based calorie model.

calories = effective MET * body weight (kg) * duration (h), where the effective
MET is the category's base MET scaled by intensity around a neutral value of 5.
Flexibility keeps its base MET regardless of intensity.
"""
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import ClassVar, Dict, Optional, Type

from fitness.domain.Profile import Profile
from fitness.utilities.constants import (
    CARDIO_INTENSITY_SLOPE,
    FLEXIBILITY_BASE_MET,
    FLEXIBILITY_INTENSITY_SLOPE,
    MAX_INTENSITY,
    MIN_INTENSITY,
    NEUTRAL_INTENSITY,
    STRENGTH_BASE_MET,
    STRENGTH_INTENSITY_SLOPE,
)
from fitness.utilities.errors import InvalidParameter


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Activity(ABC):
    label: str
    duration_minutes: int
    intensity: int

    CATEGORY: ClassVar[str] = "Activity"
    INTENSITY_SLOPE: ClassVar[float] = 0.0

    def __post_init__(self):
        if not _is_int(self.duration_minutes) or self.duration_minutes <= 0:
            raise InvalidParameter(f"Duration must be a positive number of minutes: {self.duration_minutes!r}")
        if not _is_int(self.intensity) or not MIN_INTENSITY <= self.intensity <= MAX_INTENSITY:
            raise InvalidParameter(
                f"Intensity must be between {MIN_INTENSITY} and {MAX_INTENSITY}: {self.intensity!r}"
            )

    @property
    @abstractmethod
    def base_met(self) -> float:
        ...

    def effective_met(self) -> float:
        return self.base_met * (1.0 + (self.intensity - NEUTRAL_INTENSITY) * self.INTENSITY_SLOPE)

    def estimate_calories(self, profile: Profile) -> float:
        '''Estimated kcal burned by the given profile doing this activity.'''
        if not math.isfinite(profile.weight_kg) or profile.weight_kg <= 0:
            raise InvalidParameter(f"Weight must be positive to estimate calories: {profile.weight_kg}")
        hours = self.duration_minutes / 60.0
        return self.effective_met() * profile.weight_kg * hours

    def info(self) -> str:
        return f"{self.CATEGORY} - {self.label} ({self.duration_minutes} min, intensity {self.intensity})"

    def __str__(self) -> str:
        return self.info()

    def copy(self) -> "Activity":
        '''Returns a new activity of the same category with the same parameters.'''
        return replace(self)

    def to_dict(self):
        return {
            "category": self.CATEGORY,
            "label": self.label,
            "duration_minutes": self.duration_minutes,
            "intensity": self.intensity,
        }

    @staticmethod
    def from_dict(data) -> "Activity":
        '''Creates the concrete activity named by data["category"].'''
        d = dict(data) if isinstance(data, dict) else {}
        category = str(d.pop("category", "")).strip().lower()
        cls = CATEGORIES.get(category)
        if cls is None:
            raise InvalidParameter(f"Unknown activity category: {category!r}")
        allowed = {"label", "duration_minutes", "intensity"}
        if cls is Cardio:
            allowed.add("met_base")
        filtered = {k: v for k, v in d.items() if k in allowed}
        try:
            return cls(**filtered)
        except TypeError as e:
            raise InvalidParameter(f"Missing {cls.CATEGORY} parameters: {e}") from e


@dataclass(frozen=True)
class Cardio(Activity):
    met_base: float

    CATEGORY: ClassVar[str] = "Cardio"
    INTENSITY_SLOPE: ClassVar[float] = CARDIO_INTENSITY_SLOPE

    def __post_init__(self):
        super().__post_init__()
        if (isinstance(self.met_base, bool) or not isinstance(self.met_base, (int, float))
                or not math.isfinite(self.met_base) or self.met_base <= 0):
            raise InvalidParameter(f"Cardio MET must be a positive finite number: {self.met_base!r}")

    @property
    def base_met(self) -> float:
        return float(self.met_base)

    def estimate_calories(self, profile: Profile, extra_multiplier: Optional[float] = None) -> float:
        '''Estimated kcal, optionally scaled by extra_multiplier.'''
        calories = super().estimate_calories(profile)
        if extra_multiplier is None:
            return calories
        return calories * extra_multiplier

    def to_dict(self):
        d = super().to_dict()
        d["met_base"] = self.met_base
        return d


@dataclass(frozen=True)
class Strength(Activity):
    CATEGORY: ClassVar[str] = "Strength"
    INTENSITY_SLOPE: ClassVar[float] = STRENGTH_INTENSITY_SLOPE

    @property
    def base_met(self) -> float:
        return STRENGTH_BASE_MET


@dataclass(frozen=True)
class Flexibility(Activity):
    CATEGORY: ClassVar[str] = "Flexibility"
    INTENSITY_SLOPE: ClassVar[float] = FLEXIBILITY_INTENSITY_SLOPE

    @property
    def base_met(self) -> float:
        return FLEXIBILITY_BASE_MET

    def effective_met(self) -> float:
        # Flexibility work is modelled as intensity-independent
        return self.base_met


CATEGORIES: Dict[str, Type[Activity]] = {
    cls.CATEGORY.lower(): cls for cls in (Cardio, Strength, Flexibility)
}

__all__ = ["Activity", "Cardio", "Strength", "Flexibility", "CATEGORIES"]
