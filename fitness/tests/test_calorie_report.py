import unittest
from fitness.domain.Plan import Plan
from fitness.domain.Profile import Profile
from fitness.logic.recommendation.recommender import recommend
from fitness.logic.reporting.calories import compute_plan_calories


class TestCalorieReport(unittest.TestCase):

    def setUp(self):
        self.profile = Profile("Devin M.", 22, 72.5, 175.0, "M")

    def test_lose_weight_report(self):
        report = compute_plan_calories(recommend("Lose weight"), self.profile)
        self.assertEqual([row["label"] for row in report["activities"]],
                         ["HIIT", "Full-body strength", "Stretch"])
        self.assertEqual([row["calories"] for row in report["activities"]], [362.5, 234.9, 54.38])
        self.assertEqual(report["total_minutes"], 70)
        self.assertAlmostEqual(report["total_calories"], 651.775, delta=0.006)

    def test_row_fields(self):
        row = compute_plan_calories(recommend("Maintain"), self.profile)["activities"][0]
        self.assertEqual(row["category"], "Cardio")
        self.assertEqual(row["duration_minutes"], 30)
        self.assertEqual(row["intensity"], 5)

    def test_empty_plan(self):
        report = compute_plan_calories(Plan(), self.profile)
        self.assertEqual(report, {"activities": [], "total_minutes": 0, "total_calories": 0.0})


if __name__ == '__main__':
    unittest.main()
