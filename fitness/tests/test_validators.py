import unittest
from pydantic import ValidationError
from fitness.domain.Activity import Cardio, Flexibility
from fitness.utilities.validators import ActivityInput, MergeInput, ProfileInput, SessionInput

PROFILE = {"name": " Devin M. ", "age": 22, "weight_kg": 72.5, "height_cm": 175.0, "sex": "m", "goal": "Lose weight"}


class TestValidators(unittest.TestCase):

    def test_profile_input_normalises(self):
        profile = ProfileInput(**PROFILE).to_profile()
        self.assertEqual(profile.name, "Devin M.")
        self.assertEqual(profile.sex, "M")
        self.assertEqual(profile.goal, "Lose weight")

    def test_profile_input_rejects_bad_values(self):
        for key, value in [("height_cm", 0), ("weight_kg", -1), ("age", -3), ("sex", "X")]:
            data = dict(PROFILE, **{key: value})
            with self.assertRaises(ValidationError, msg=key):
                ProfileInput(**data)

    def test_profile_input_rejects_control_characters(self):
        for key, value in [("name", "Devin\nM."), ("name", "Tab\tName"), ("goal", "Lose\r\nweight")]:
            with self.assertRaises(ValidationError, msg=repr(value)):
                ProfileInput(**dict(PROFILE, **{key: value}))
        self.assertEqual(ProfileInput(**dict(PROFILE, name="José Ñúñez")).name, "José Ñúñez")

    def test_profile_goal_default(self):
        data = dict(PROFILE)
        data.pop("goal")
        self.assertEqual(ProfileInput(**data).goal, "Maintain")

    def test_activity_input(self):
        act = ActivityInput(category="cardio", label="Row", duration_minutes=20, intensity=6, met_base=7.0)
        self.assertEqual(act.to_activity(), Cardio("Row", 20, 6, 7.0))
        flex = ActivityInput(category="Flexibility", label="Yoga", duration_minutes=20, intensity=3)
        self.assertEqual(flex.to_activity(), Flexibility("Yoga", 20, 3))

    def test_activity_input_rejects(self):
        with self.assertRaises(ValidationError):
            ActivityInput(category="Swimming", label="Laps", duration_minutes=20, intensity=5)
        with self.assertRaises(ValidationError):
            ActivityInput(category="Cardio", label="Row", duration_minutes=20, intensity=5)
        with self.assertRaises(ValidationError):
            ActivityInput(category="Strength", label="Lift", duration_minutes=20, intensity=11)
        with self.assertRaises(ValidationError):
            ActivityInput(category="Strength", label="Lift", duration_minutes=0, intensity=5)

    def test_merge_input_plans(self):
        merge = MergeInput(profile=PROFILE, first=[
            {"category": "Strength", "label": "Lift", "duration_minutes": 30, "intensity": 5},
        ])
        self.assertEqual(len(merge.first_plan()), 1)
        self.assertIsNone(merge.second_plan())

    def test_session_input(self):
        session = SessionInput(profile=PROFILE, activity={"category": "Strength", "label": "Lift",
                                                         "duration_minutes": 30, "intensity": 5})
        self.assertIsNone(session.calories)
        with self.assertRaises(ValidationError):
            SessionInput(profile=PROFILE, activity=session.activity, calories=-5)


if __name__ == '__main__':
    unittest.main()
