# 📦 /tests/test_smoke.py

from fastapi.testclient import TestClient
from main import app
from tests.utils.dummies import FULL_WEEK

client = TestClient(app)

def make_assessment(**overrides):
    body = {
        "concerns": ["Anxiety"],
        "impactLevel": 5,
        "lifestyle": "High-stress, fast-paced",
        "duration": "More than 1 year",
    }
    body.update(overrides)
    return body

def make_therapist(id, **overrides):
    body = {
        "id": id,
        "specializations": ["Cognitive Behavioral Therapy"],
        "yearsOfExperience": 12,
        "averageRating": 4.8,
        "verificationStatus": "verified",
        "availability": FULL_WEEK,
        "sessionRate": 90.0,
    }
    body.update(overrides)
    return body

def test_healthcheck():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"

def test_recommend_success():
    payload = {
        "assessment": make_assessment(),
        "therapists": [
            make_therapist("th_junior", yearsOfExperience=1, averageRating=3.0),
            make_therapist("th_senior"),
            make_therapist("th_pending", verificationStatus="pending"),
        ],
        "options": {"limit": 2},
    }
    response = client.post("/recommend", json=payload)
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    data = body["data"]
    assert data["totalFound"] == 3
    assert [m["therapist"]["id"] for m in data["recommendations"]] == ["th_senior", "th_pending"]
    top = data["recommendations"][0]
    assert top["matchScore"] == 110.2
    assert top["matchPercentage"] == 110
    assert top["matchReasons"][0] == "Highly experienced (12+ years)"
    assert data["assessmentSummary"]["lifestyle"] == "High-stress, fast-paced"

def test_recommend_verified_only():
    payload = {
        "assessment": make_assessment(),
        "therapists": [make_therapist("th_v"), make_therapist("th_p", verificationStatus="pending")],
        "options": {"verifiedOnly": True},
    }
    data = client.post("/recommend", json=payload).json()["data"]
    assert [m["therapist"]["id"] for m in data["recommendations"]] == ["th_v"]

def test_recommend_no_candidates_is_not_an_error():
    payload = {"assessment": make_assessment(), "therapists": []}
    response = client.post("/recommend", json=payload)
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "No therapists found matching your criteria"
    assert body["data"]["recommendations"] == []
    assert body["data"]["assessmentSummary"]["concerns"] == ["Anxiety"]

def test_recommend_requires_concerns():
    payload = {"assessment": make_assessment(concerns=[]), "therapists": [make_therapist("th")]}
    response = client.post("/recommend", json=payload)
    assert response.status_code == 422
    assert response.json()["status"] == "error"

def test_recommend_rejects_impact_out_of_range():
    payload = {"assessment": make_assessment(impactLevel=7), "therapists": []}
    response = client.post("/recommend", json=payload)
    assert response.status_code == 422
    assert "Impact level" in response.json()["message"]

def test_recommend_rejects_unknown_concern():
    payload = {"assessment": make_assessment(concerns=["Loneliness"]), "therapists": []}
    assert client.post("/recommend", json=payload).status_code == 422

def test_explain():
    payload = {"assessment": make_assessment(), "therapist": make_therapist("th_senior")}
    response = client.post("/explain", json=payload)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["therapistId"] == "th_senior"
    assert data["matchScore"] == 110.2
    assert data["breakdown"]["chronicity"] == 5.0
    assert "Verified therapist" in data["matchReasons"]

def test_recommend_accepts_start_end_time_slots():
    slots = [{"start": "09:00", "end": "10:00"}]
    week = {day: slots for day in ("monday", "tuesday", "wednesday", "thursday", "friday")}
    payload = {
        "assessment": make_assessment(),
        "therapists": [
            make_therapist("th_slots", availability={"monday": [{"start": "09:00", "end": "10:00"}]}),
            make_therapist("th_week", availability=week),
        ],
    }
    response = client.post("/recommend", json=payload)
    assert response.status_code == 200
    recs = response.json()["data"]["recommendations"]
    assert [m["therapist"]["id"] for m in recs] == ["th_week", "th_slots"]
    assert recs[1]["therapist"]["availability"]["monday"][0] == {"start": "09:00", "end": "10:00"}
    assert "Highly available" in recs[0]["matchReasons"]

def test_explain_accepts_start_end_time_slots():
    therapist = make_therapist("th_slots", availability={"monday": [{"start": "09:00", "end": "10:00"}]})
    response = client.post("/explain", json={"assessment": make_assessment(), "therapist": therapist})
    assert response.status_code == 200
    assert response.json()["data"]["breakdown"]["availability"] == 4.0
