# -*- coding: utf-8 -*-

from __future__ import annotations

import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient


class TestPrakritiApi(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="ayurwell-test-"))
        data_root = cls._tmp / "data"
        os.environ["AYURWELL_DATA_ROOT"] = str(data_root)
        os.environ["AYURWELL_DB_PATH"] = str(data_root / "ayurwell.db")
        os.environ["AYURWELL_ELEVATED_DOSHA_PCT"] = "40"

        # Ensure settings/app reflect the env vars above.
        for name in list(sys.modules.keys()):
            if name == "ayurwell" or name.startswith("ayurwell."):
                sys.modules.pop(name, None)

        from ayurwell.api import app  # noqa: WPS433 (import inside test for env control)

        cls.client = TestClient(app)

    @classmethod
    def tearDownClass(cls) -> None:
        cls.client.close()
        shutil.rmtree(cls._tmp, ignore_errors=True)

    def test_health(self) -> None:
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "ok")

    def test_questionnaire(self) -> None:
        resp = self.client.get("/api/prakriti/questionnaire")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["count"], 12)
        first = data["dimensions"][0]
        self.assertEqual(first["name"], "body_frame")
        self.assertEqual([o["key"] for o in first["options"]], ["lightSlim", "mediumMusclular", "heavyRobust"])
        self.assertEqual(first["options"][0]["leaning"], "vata")

    def test_classify(self) -> None:
        resp = self.client.post(
            "/api/prakriti/classify",
            json={"answers": {"body_frame": "lightSlim", "skin_type": "drySensitive", "eyes": "sparkly"}},
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["result"]["primary_dosha"], "vata")
        self.assertEqual(data["result"]["secondary_dosha"], "pitta")
        self.assertEqual(data["result"]["scores"], {"vata": 83, "pitta": 17, "kapha": 0})
        self.assertEqual(data["unmatched"], ["eyes"])
        self.assertEqual(len(data["warnings"]), 1)
        self.assertTrue(data["result"]["feeding_habits"])

    def test_classify_invalid_input(self) -> None:
        resp = self.client.post("/api/prakriti/classify", json={"answers": {}})
        self.assertEqual(resp.status_code, 400)
        resp = self.client.post("/api/prakriti/classify", json={"answers": {"body_frame": "nope"}})
        self.assertEqual(resp.status_code, 400)
        resp = self.client.post("/api/prakriti/classify", json={})
        self.assertEqual(resp.status_code, 422)

    def test_assessment_lifecycle(self) -> None:
        user_id = "user_lifecycle"
        resp = self.client.get(f"/api/users/{user_id}/dosha-profile")
        self.assertEqual(resp.status_code, 404)

        resp = self.client.post(
            f"/api/users/{user_id}/prakriti-assessments",
            json={"answers": {"body_frame": "lightSlim", "hair_type": "thinDryWiry"}},
        )
        self.assertEqual(resp.status_code, 200)
        first = resp.json()
        self.assertEqual(first["result"]["primary_dosha"], "vata")

        resp = self.client.post(
            f"/api/users/{user_id}/prakriti-assessments",
            json={"answers": {"appetite": "sharpIncreased", "digestion": "efficient", "sleep_pattern": "heavyHeavy"}},
        )
        self.assertEqual(resp.status_code, 200)
        second = resp.json()
        self.assertEqual(second["result"]["primary_dosha"], "pitta")
        self.assertEqual(second["result"]["secondary_dosha"], "kapha")

        resp = self.client.get(f"/api/users/{user_id}/prakriti-assessments")
        self.assertEqual(resp.status_code, 200)
        listing = resp.json()
        self.assertEqual(listing["count"], 2)
        self.assertEqual(listing["items"][0]["id"], second["id"])

        resp = self.client.get(f"/api/users/{user_id}/dosha-profile")
        self.assertEqual(resp.status_code, 200)
        profile = resp.json()
        self.assertEqual(profile["id"], second["id"])
        self.assertEqual(profile["result"]["scores"], {"vata": 0, "pitta": 67, "kapha": 33})
        self.assertIn("Sharp intellect and focus", profile["result"]["characteristics"])

        resp = self.client.get(f"/api/prakriti/assessments/{first['id']}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["answers"], {"body_frame": "lightSlim", "hair_type": "thinDryWiry"})

        resp = self.client.get("/api/prakriti/assessments/missing")
        self.assertEqual(resp.status_code, 404)

    def test_invalid_assessment_is_not_stored(self) -> None:
        user_id = "user_invalid"
        resp = self.client.post(f"/api/users/{user_id}/prakriti-assessments", json={"answers": {"x": "y"}})
        self.assertEqual(resp.status_code, 400)
        resp = self.client.get(f"/api/users/{user_id}/prakriti-assessments")
        self.assertEqual(resp.json()["count"], 0)

    def test_dosha_balance(self) -> None:
        resp = self.client.post(
            "/api/analytics/dosha-balance",
            json={
                "foods": [
                    {"name": "Spicy curry", "dosha": {"vata": 0, "pitta": 3, "kapha": 0}},
                    {"name": "Rice", "dosha": {"vata": 1, "pitta": 0, "kapha": 1}},
                    {"name": "Tea"},
                ]
            },
        )
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["balance"], {"vata": 20, "pitta": 60, "kapha": 20})
        self.assertEqual(data["dominant_dosha"], "pitta")
        self.assertEqual(data["food_count"], 3)
        self.assertEqual(data["suggestions"][0]["id"], "pitta-cooling-foods")

    def test_suggestions_endpoint(self) -> None:
        resp = self.client.get("/api/analytics/suggestions/Kapha?priority=high")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["dosha"], "kapha")
        self.assertEqual(data["count"], 1)
        resp = self.client.get("/api/analytics/suggestions/ether")
        self.assertEqual(resp.status_code, 404)


if __name__ == "__main__":
    unittest.main()
