import os
import shutil
import tempfile
import unittest
from fastapi.testclient import TestClient
from fitness.api import api_run
from fitness.api.api_run import app
from fitness.infra.Session_Logger import SessionLogger

PROFILE = {"name": "Devin M.", "age": 22, "weight_kg": 72.5, "height_cm": 175.0, "sex": "M", "goal": "Lose weight"}


class TestFitnessAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self._original_logger = api_run.session_logger
        api_run.session_logger = SessionLogger(os.path.join(self.tmp_dir, "fitness_log.txt"))

    def tearDown(self):
        api_run.session_logger = self._original_logger
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def test_health(self):
        resp = self.client.get('/api/health')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"status": "ok"})

    def test_bmi(self):
        resp = self.client.post('/api/bmi', json=PROFILE)
        self.assertEqual(resp.status_code, 200)
        self.assertAlmostEqual(resp.json()["bmi"], 23.67, places=2)

    def test_bmi_zero_height_rejected(self):
        resp = self.client.post('/api/bmi', json=dict(PROFILE, height_cm=0))
        self.assertEqual(resp.status_code, 422)

    def test_recommend_uses_profile_goal(self):
        resp = self.client.post('/api/recommend', json={"profile": PROFILE})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["policy"], "lose")
        self.assertEqual(data["count"], 3)
        self.assertEqual(data["show"][0], "Cardio - HIIT (25 min, intensity 9)")
        self.assertAlmostEqual(data["report"]["total_calories"], 651.775, delta=0.006)

    def test_recommend_explicit_goal(self):
        resp = self.client.post('/api/recommend', json={"profile": PROFILE, "goal": "Maintain"})
        data = resp.json()
        self.assertEqual(data["policy"], "maintain")
        self.assertEqual([a["label"] for a in data["activities"]], ["Steady-state", "Maintenance strength"])

    def test_merge_with_sample(self):
        first = [{"category": "Strength", "label": "Lift", "duration_minutes": 30, "intensity": 5}]
        resp = self.client.post('/api/plans/merge', json={"profile": PROFILE, "first": first})
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["count"], 4)
        self.assertEqual([a["label"] for a in data["activities"]], ["Lift", "Jogging", "Circuit training", "Yoga"])

    def test_merge_two_plans(self):
        first = [{"category": "Flexibility", "label": "Stretch", "duration_minutes": 15, "intensity": 2}]
        second = [{"category": "Cardio", "label": "Bike", "duration_minutes": 40, "intensity": 6, "met_base": 8.0}]
        resp = self.client.post('/api/plans/merge', json={"profile": PROFILE, "first": first, "second": second})
        data = resp.json()
        self.assertEqual(data["show"], [
            "Flexibility - Stretch (15 min, intensity 2)",
            "Cardio - Bike (40 min, intensity 6)",
        ])

    def test_merge_invalid_activity(self):
        first = [{"category": "Cardio", "label": "Bike", "duration_minutes": 40, "intensity": 6}]
        resp = self.client.post('/api/plans/merge', json={"profile": PROFILE, "first": first})
        self.assertEqual(resp.status_code, 422)

    def test_log_and_list_sessions(self):
        activity = {"category": "Cardio", "label": "Temp Jog", "duration_minutes": 30, "intensity": 6, "met_base": 7.0}
        resp = self.client.post('/api/sessions', json={"profile": PROFILE, "activity": activity})
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()["logged"].endswith("Devin M. did Temp Jog for 30 min, calories: 266.44"))
        self.assertEqual(resp.json()["info"], "Cardio - Temp Jog (30 min, intensity 6)")

        self.client.post('/api/sessions', json={"profile": PROFILE, "activity": activity, "calories": 10})
        listing = self.client.get('/api/sessions').json()
        self.assertEqual(listing["count"], 2)
        self.assertTrue(listing["sessions"][1].endswith("calories: 10.00"))
        latest = self.client.get('/api/sessions', params={"limit": 1}).json()
        self.assertEqual(latest["count"], 1)

    def test_recommend_echoes_profile(self):
        data = self.client.post('/api/recommend', json={"profile": dict(PROFILE, name="  Ana ")}).json()
        self.assertEqual(data["profile"]["name"], "Ana")
        self.assertEqual(data["profile"]["goal"], "Lose weight")

    def test_name_with_newline_rejected(self):
        resp = self.client.post('/api/bmi', json=dict(PROFILE, name="Devin\nM."))
        self.assertEqual(resp.status_code, 422)

    def test_events_feed_registered_at_startup(self):
        with TestClient(app) as client:
            cursor = client.get('/api/events').json()["next_cursor"]
            client.post('/api/recommend', json={"profile": PROFILE, "goal": "Build muscle"})
            feed = client.get('/api/events', params={"since": cursor}).json()
        self.assertEqual(len(feed["events"]), 1)
        self.assertEqual(feed["events"][0]["type"], "plan.recommended")
        self.assertEqual(feed["events"][0]["policy"], "build")
        self.assertGreater(feed["next_cursor"], cursor)

    def test_recommend_pdf(self):
        resp = self.client.post('/api/recommend/pdf', json={"profile": PROFILE})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers["content-type"], "application/pdf")
        self.assertTrue(resp.content.startswith(b"%PDF"))


if __name__ == '__main__':
    unittest.main()
