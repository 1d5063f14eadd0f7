from typing import Final

# Base MET per activity category
STRENGTH_BASE_MET: Final[float] = 6.0
FLEXIBILITY_BASE_MET: Final[float] = 3.0

# Change of MET per intensity point away from the neutral intensity
CARDIO_INTENSITY_SLOPE: Final[float] = 0.05
STRENGTH_INTENSITY_SLOPE: Final[float] = 0.04
FLEXIBILITY_INTENSITY_SLOPE: Final[float] = 0.0

NEUTRAL_INTENSITY: Final[int] = 5
MIN_INTENSITY: Final[int] = 1
MAX_INTENSITY: Final[int] = 10

VALID_SEXES: Final[tuple[str, ...]] = ("M", "F")
DEFAULT_GOAL: Final[str] = "Maintain"

# Goal keywords, checked in order (first match wins)
GOAL_LOSE: Final[str] = "lose"
GOAL_BUILD: Final[str] = "build"

SESSION_LINE_FORMAT: Final[str] = "[{ts}] {name} did {label} for {minutes} min, calories: {calories:.2f}\n"
