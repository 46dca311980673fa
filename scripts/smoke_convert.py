"""Smoke script for the conversion API.

Sequence:
 1. Health check.
 2. History on a fresh app (expect []).
 3. A handful of valid conversions, including both score boundaries.
 4. Each rejection path (missing fields, bad countries, out of range).
 5. Twelve more conversions, then history (expect 10, most recent first).
"""

import json

from fastapi.testclient import TestClient

from wealth_id.core.config import Settings
from wealth_id.main import create_app


def run():
    app = create_app(settings_override=Settings())
    client = TestClient(app)

    results = {}
    results["health"] = client.get("/health").json()
    results["history_empty"] = client.get("/api/history").json()
    results["us_to_uk_1000"] = client.post(
        "/api/convert", json={"countryFrom": "US", "countryTo": "UK", "score": 1000}
    ).json()
    results["india_to_us_800"] = client.post(
        "/api/convert", json={"countryFrom": "India", "countryTo": "US", "score": 800}
    ).json()
    results["zero_status"] = client.post(
        "/api/convert", json={"countryFrom": "Canada", "countryTo": "UK", "score": 0}
    ).status_code

    rejections = {
        "missing": {"countryFrom": "US", "countryTo": "UK"},
        "bad_from": {"countryFrom": "Mars", "countryTo": "UK", "score": 500},
        "bad_to": {"countryFrom": "US", "countryTo": "Mars", "score": 500},
        "too_high": {"countryFrom": "US", "countryTo": "UK", "score": 1001},
    }
    for name, payload in rejections.items():
        resp = client.post("/api/convert", json=payload)
        results[f"{name}_status"] = resp.status_code
        results[f"{name}_body"] = resp.json()

    for score in range(100, 1300, 100):
        client.post(
            "/api/convert",
            json={"countryFrom": "US", "countryTo": "India", "score": min(score, 1000)},
        )
    history = client.get("/api/history").json()
    results["history_len"] = len(history)
    results["history_scores"] = [h["originalScore"] for h in history]
    results["unknown_route"] = client.get("/api/unknown").json()
    print(json.dumps(results, indent=2))


if __name__ == "__main__":
    run()
