"""
Integration Test Suite for the Care Insights API
=================================================

Exercises the HTTP surface end-to-end:
1. Symptom analysis and input validation
2. Reference lists
3. Analytics endpoints
4. Health check

Run with: pytest test_integration.py
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, get_type_hints

import pytest
from fastapi.testclient import TestClient

from care_insights import config
from care_insights.app import app


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


# ===== SYMPTOMS =====

def test_analyze_influenza(client):
    response = client.post("/symptoms/analyze", json={
        "symptoms": [
            {"symptom": "high fever", "severity": "severe"},
            {"symptom": "body aches", "severity": "moderate"},
            {"symptom": "cough", "severity": "moderate"},
        ],
    })

    assert response.status_code == 200
    data = response.json()
    assert data["predictions"][0]["disease"] == "Influenza (Flu)"
    assert data["predictions"][0]["confidence"] > 0.5
    assert data["urgency_level"] == "moderate"
    assert len(data["predictions"]) <= 5


def test_analyze_chest_pain_is_emergency(client):
    response = client.post("/symptoms/analyze", json={
        "symptoms": [{"symptom": "chest pain", "severity": "severe"}],
        "context": {"age": 58, "existing_conditions": ["hypertension"]},
    })

    assert response.status_code == 200
    data = response.json()
    assert data["urgency_level"] == "emergency"
    assert data["context"]["age"] == 58


@pytest.mark.parametrize("body", [
    {"symptoms": [{"symptom": "fever", "severity": "extreme"}]},
    {"symptoms": [{"symptom": "   ", "severity": "mild"}]},
    {"symptoms": []},
    {},
])
def test_analyze_rejects_malformed_input(client, body):
    assert client.post("/symptoms/analyze", json=body).status_code == 422


def test_reference_lists(client):
    symptoms = client.get("/symptoms/common").json()["symptoms"]
    specialists = client.get("/specialists").json()["specialists"]

    assert "Fever" in symptoms
    assert symptoms == sorted(symptoms)
    assert "General Physician" in specialists


# ===== ANALYTICS =====

def test_no_show_endpoint(client):
    response = client.post("/analytics/no-show", json={
        "appointment": {"appointment_date": "2024-03-02T20:00:00", "is_paid": False},
        "history": {"total_appointments": 10, "no_shows": 10},
        "now": "2024-01-01T08:00:00",
    })

    assert response.status_code == 200
    data = response.json()
    assert data["probability"] == 88
    assert data["risk_level"] == "high"


def test_revenue_forecast_from_payments(client):
    response = client.post("/analytics/revenue-forecast", json={
        "payments": [
            {"paid_at": "2024-01-01T10:00:00", "amount": 100},
            {"paid_at": "2024-01-02T10:00:00", "amount": 100},
        ],
        "period_days": 30,
    })

    assert response.status_code == 200
    data = response.json()
    assert data["forecast_amount"] == 3000
    assert data["confidence"] == 100
    assert data["trend"] == "stable"


def test_revenue_forecast_empty(client):
    data = client.post("/analytics/revenue-forecast", json={}).json()
    assert data["forecast_amount"] == 0
    assert data["trend"] == "insufficient_data"


def test_revenue_forecast_rejects_zero_period(client):
    response = client.post("/analytics/revenue-forecast", json={"period_days": 0})
    assert response.status_code == 422


def test_peak_hours_endpoint(client):
    response = client.post("/analytics/peak-hours", json={
        "appointments": [
            {"appointment_date": "2024-01-10T10:00:00", "consultation_fee": 50},
            {"appointment_date": "2024-01-10T10:30:00", "consultation_fee": 50},
        ],
    })

    data = response.json()
    assert data["peak_hour"]["index"] == 10
    assert data["peak_day"]["label"] == "Wednesday"
    assert len(data["hourly_distribution"]) == 24


def test_outbreak_endpoint(client):
    analyses = [
        {"created_at": "2024-01-09T12:00:00", "predictions": [{"disease": "Dengue Fever", "confidence": 0.6}]}
        for _ in range(3)
    ]
    analyses += [
        {"created_at": "2024-01-09T12:00:00", "predictions": [{"disease": "Common Cold", "confidence": 0.3}]}
        for _ in range(7)
    ]

    response = client.post("/analytics/outbreaks", json={
        "analyses": analyses,
        "window_days": 7,
        "now": "2024-01-10T12:00:00",
    })

    data = response.json()
    assert data["total_analyses"] == 10
    assert "Dengue Fever" in data["alert"]


def test_retention_endpoint(client):
    response = client.post("/analytics/retention", json={
        "patients": [{"patient_id": "p1"}, {"patient_id": "p2"}],
        "appointments": [
            {"appointment_date": "2024-05-20T10:00:00", "patient_id": "p1"},
            {"appointment_date": "2023-01-01T10:00:00", "patient_id": "p2"},
        ],
        "now": "2024-06-01T00:00:00",
    })

    data = response.json()
    assert data["active_patients"] == 1
    assert data["lost_patients"] == 1
    assert data["retention_rate"] == 50.0


def test_success_rate_endpoint(client):
    response = client.post("/analytics/success-rate", json={
        "appointments": [{"appointment_date": "2024-01-10T10:00:00", "status": "completed"}],
        "reviews": [{"rating": 5}, {"rating": 2}],
    })

    data = response.json()
    assert data["success_rate"] == 50.0
    assert data["total_treated"] == 1


def test_dashboard_endpoint(client):
    response = client.post("/analytics/dashboard", json={"now": "2024-01-31T12:00:00"})

    assert response.status_code == 200
    data = response.json()
    assert data["overview"]["total_appointments"] == 0
    assert data["peak_hours"] is None


def test_dashboard_with_only_utc_payments(client):
    paid_at = (datetime.now(timezone.utc) - timedelta(days=1)).isoformat().replace("+00:00", "Z")
    response = client.post("/analytics/dashboard", json={
        "payments": [{"paid_at": paid_at, "amount": 50}],
    })

    assert response.status_code == 200
    assert response.json()["overview"]["total_revenue"] == 50


@pytest.mark.parametrize("body", [
    {"analyses": [{"created_at": "2024-01-09T12:00:00Z"}], "now": "2024-01-10T12:00:00"},
    {"analyses": [{"created_at": "2024-01-09T12:00:00Z"}, {"created_at": "2024-01-09T13:00:00"}]},
])
def test_outbreak_rejects_mixed_timezones(client, body):
    response = client.post("/analytics/outbreaks", json=body)
    assert response.status_code == 422


# ===== HEALTH =====

def test_health(client):
    data = client.get("/health").json()
    assert data["status"] == "healthy"
    assert data["diseases"] > 0


def test_setup_logging_level_is_optional():
    hints = get_type_hints(config.setup_logging)
    assert hints["level"] == Optional[str]
    config.setup_logging()
