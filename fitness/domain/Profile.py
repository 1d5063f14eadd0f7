"""Profile domain entity: name, age, weight, height, sex and fitness goal."""
from dataclasses import dataclass

from fitness.utilities.constants import DEFAULT_GOAL
from fitness.utilities.errors import InvalidDimension


@dataclass(frozen=True)
class Profile:
    name: str = "Unknown"
    age: int = 18
    weight_kg: float = 70.0
    height_cm: float = 170.0
    sex: str = "M"
    goal: str = DEFAULT_GOAL

    def bmi(self) -> float:
        '''Body-mass index: weight in kg over height in metres squared.'''
        height_m = self.height_cm / 100.0
        if height_m <= 0:
            raise InvalidDimension(f"Invalid height for BMI calculation: {self.height_cm} cm")
        return self.weight_kg / (height_m * height_m)

    def __str__(self) -> str:
        return f"{self.name} ({self.age}y, {self.sex}) - {self.weight_kg} kg, {self.height_cm} cm - Goal: {self.goal}"

    @staticmethod
    def from_dict(data):
        '''Creates a Profile from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"name", "age", "weight_kg", "height_cm", "sex", "goal"}
        return Profile(**{k: v for k, v in d.items() if k in allowed})

    def to_dict(self):
        return {
            "name": self.name,
            "age": self.age,
            "weight_kg": self.weight_kg,
            "height_cm": self.height_cm,
            "sex": self.sex,
            "goal": self.goal,
        }
