from datetime import datetime, timedelta

from ayora.extensions import db
from ayora.models.meal import Meal


def add_meal(client, headers, **overrides):
    body = {"food_name": "Dal", "quantity": 1, "unit": "bowl", "meal_type": "lunch"}
    body.update(overrides)
    r = client.post("/api/meals", headers=headers, json=body)
    assert r.status_code == 201, r.data
    return r.get_json()


def test_routes_require_doctor_role(client, patient_headers):
    r = client.get("/api/doctors/patients/requiring-attention", headers=patient_headers)
    assert r.status_code == 403
    assert r.get_json()["error"]["code"] == "FORBIDDEN"


def test_patient_meals_for_assigned_patient(client, doctor_headers, patient_headers, user_ids):
    add_meal(client, patient_headers)
    add_meal(client, patient_headers, food_name="Rice", meal_type="dinner")

    r = client.get(f"/api/doctors/patients/{user_ids['patient']}/meals", headers=doctor_headers)
    assert r.status_code == 200, r.data
    data = r.get_json()
    assert data["pagination"]["total_meals"] == 2
    assert {m["food_name"] for m in data["items"]} == {"Dal", "Rice"}


def test_unassigned_patient_is_not_found(client, doctor_headers, other_doctor_headers, user_ids):
    r = client.get(f"/api/doctors/patients/{user_ids['other_patient']}/meals", headers=doctor_headers)
    assert r.status_code == 404

    r = client.get(f"/api/doctors/patients/{user_ids['patient']}/nutrition-summary", headers=other_doctor_headers)
    assert r.status_code == 404


def test_patient_nutrition_summary_with_breakdown(client, doctor_headers, patient_headers, user_ids):
    add_meal(client, patient_headers, food_name="Dal", meal_type="lunch")
    add_meal(client, patient_headers, food_name="Dal", meal_type="lunch")
    add_meal(client, patient_headers, food_name="Apple", meal_type="snack", unit="piece")

    r = client.get(f"/api/doctors/patients/{user_ids['patient']}/nutrition-summary", headers=doctor_headers)
    assert r.status_code == 200, r.data
    data = r.get_json()
    assert data["summary"]["meal_count"] == 3
    assert data["summary"]["total_calories"] == 292
    assert data["meal_type_breakdown"] == [
        {"meal_type": "lunch", "count": 2, "avg_calories": 120, "total_calories": 240},
        {"meal_type": "snack", "count": 1, "avg_calories": 52, "total_calories": 52},
    ]


def test_assign_patient(client, doctor_headers, user_ids):
    r = client.post("/api/doctors/patients/assign", headers=doctor_headers,
                    json={"patient_id": user_ids["other_patient"]})
    assert r.status_code == 200, r.data
    assert r.get_json()["patient"]["doctor_id"] == user_ids["doctor"]

    r = client.get("/api/users/patients", headers=doctor_headers)
    assert len(r.get_json()) == 2


def test_assign_patient_rejects_non_patients(client, doctor_headers, user_ids):
    r = client.post("/api/doctors/patients/assign", headers=doctor_headers,
                    json={"patient_id": user_ids["other_doctor"]})
    assert r.status_code == 404

    r = client.post("/api/doctors/patients/assign", headers=doctor_headers, json={})
    assert r.status_code == 400


def test_review_meal(client, doctor_headers, patient_headers, user_ids):
    meal = add_meal(client, patient_headers)

    r = client.post(f"/api/doctors/meals/{meal['id']}/review", headers=doctor_headers, json={
        "feedback": "Add more greens",
        "recommendations": ["spinach", "less salt"],
        "rating": 4,
        "status": "requires_attention",
    })
    assert r.status_code == 200, r.data
    review = r.get_json()["doctor_review"]
    assert review["reviewed_by"] == {"id": user_ids["doctor"], "name": "Doctor Who"}
    assert review["feedback"] == "Add more greens"
    assert review["recommendations"] == ["spinach", "less salt"]
    assert review["rating"] == 4
    assert review["status"] == "requires_attention"
    assert review["review_date"] is not None

    # the patient sees the review on their own meal
    r = client.get(f"/api/meals/{meal['id']}", headers=patient_headers)
    assert r.get_json()["doctor_review"]["feedback"] == "Add more greens"


def test_review_meal_defaults(client, doctor_headers, patient_headers):
    meal = add_meal(client, patient_headers)
    r = client.post(f"/api/doctors/meals/{meal['id']}/review", headers=doctor_headers, json={})
    assert r.status_code == 200, r.data
    review = r.get_json()["doctor_review"]
    assert review["rating"] == 3
    assert review["status"] == "reviewed"


def test_review_meal_of_unassigned_patient_forbidden(client, doctor_headers, other_patient_headers):
    meal = add_meal(client, other_patient_headers)
    r = client.post(f"/api/doctors/meals/{meal['id']}/review", headers=doctor_headers, json={"rating": 5})
    assert r.status_code == 403

    r = client.post("/api/doctors/meals/9999/review", headers=doctor_headers, json={})
    assert r.status_code == 404


def test_review_meal_rejects_bad_rating(client, doctor_headers, patient_headers):
    meal = add_meal(client, patient_headers)
    r = client.post(f"/api/doctors/meals/{meal['id']}/review", headers=doctor_headers, json={"rating": 9})
    assert r.status_code == 400


def test_patients_requiring_attention(client, app, doctor_headers, patient_headers, user_ids):
    pending = add_meal(client, patient_headers, food_name="Soup")
    reviewed = add_meal(client, patient_headers, food_name="Fish")
    client.post(f"/api/doctors/meals/{reviewed['id']}/review", headers=doctor_headers, json={"status": "approved"})

    old = add_meal(client, patient_headers, food_name="Pasta")
    with app.app_context():
        meal = db.session.get(Meal, old["id"])
        meal.created_at = datetime.utcnow() - timedelta(days=10)
        db.session.commit()

    r = client.get("/api/doctors/patients/requiring-attention", headers=doctor_headers)
    assert r.status_code == 200, r.data
    data = r.get_json()
    assert len(data) == 1
    assert data[0]["id"] == user_ids["patient"]
    assert data[0]["recent_meals_requiring_attention"] == 1
    assert data[0]["last_meal_date"] == pending["created_at"]
