import pytest

from ai_stub import create_stub_app


@pytest.fixture()
def stub():
    return create_stub_app().test_client()


def test_health(stub):
    r = stub.get("/health")
    assert r.status_code == 200
    assert r.get_json()["status"] == "ok"


def test_analyze(stub):
    r = stub.post("/analyze", json={"food_name": "Dal makhani", "quantity": 250, "unit": "grams"})
    assert r.status_code == 200
    data = r.get_json()
    assert data["calories"] == 300
    assert data["protein"] == 20
    assert data["ayurvedic_tag"] == "astringent"


def test_analyze_defaults_to_one_serving(stub):
    r = stub.post("/analyze", json={"food_name": "Yogurt"})
    assert r.get_json()["calories"] == 61


def test_analyze_validation(stub):
    r = stub.post("/analyze", json={"quantity": 1})
    assert r.status_code == 400
    assert r.get_json()["error"]["code"] == "VALIDATION_ERROR"

    r = stub.post("/analyze", json={"food_name": "Rice", "quantity": "lots"})
    assert r.status_code == 400
