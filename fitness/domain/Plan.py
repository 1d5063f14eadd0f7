"""Plan domain entity: ordered workout plan that exclusively owns its activities."""
from typing import Iterable, Iterator, List, Optional, Tuple

from fitness.domain.Activity import Activity
from fitness.domain.Profile import Profile


class Plan:
    def __init__(self, activities: Optional[Iterable[Activity]] = None):
        self._activities: List[Activity] = []
        for activity in activities or []:
            self.add(activity)

    def add(self, activity: Activity):
        '''
        Appends a copy of the activity, so no two plans hold the same instance.
        '''
        if not isinstance(activity, Activity):
            raise TypeError(f"Plan can only hold activities, got {type(activity).__name__}")
        self._activities.append(activity.copy())
        return self

    def get_items(self) -> Tuple[Activity, ...]:
        '''
        Returns the activities in insertion order.
        '''
        return tuple(self._activities)

    def total_calories(self, profile: Profile) -> float:
        total = 0.0
        for activity in self._activities:
            total += activity.estimate_calories(profile)
        return total

    def total_minutes(self) -> int:
        return sum(a.duration_minutes for a in self._activities)

    def show(self) -> List[str]:
        return [activity.info() for activity in self._activities]

    def merge(self, other: "Plan") -> "Plan":
        '''
        Returns a new plan with copies of this plan's activities followed by
        copies of the other plan's activities. Neither plan is modified.
        '''
        merged = Plan()
        for activity in self._activities + other._activities:
            merged.add(activity)
        return merged

    def __add__(self, other: "Plan") -> "Plan":
        if not isinstance(other, Plan):
            return NotImplemented
        return self.merge(other)

    def __len__(self) -> int:
        return len(self._activities)

    def __iter__(self) -> Iterator[Activity]:
        return iter(tuple(self._activities))

    def __str__(self) -> str:
        lines = "\n".join(f"  - {line}" for line in self.show())
        return f"Workout Plan ({len(self)} items):\n{lines}" if lines else "Workout Plan (0 items):"

    def __repr__(self) -> str:
        return self.__str__()

    @staticmethod
    def from_dict(data):
        '''
        Builds a Plan from a list of activity dictionaries.
        '''
        return Plan(Activity.from_dict(item) for item in (data or []))

    def to_dict(self):
        return [activity.to_dict() for activity in self._activities]
