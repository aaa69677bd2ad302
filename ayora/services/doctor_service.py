"""
Doctor Service

Patient assignment, patient lookups and meal reviews for doctor accounts.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from ayora.extensions import db
from ayora.models.meal import Meal
from ayora.models.role import Role
from ayora.models.user import User
from ayora.utils.enums import ReviewStatus, UserRole
from ayora.utils.http import iso

ATTENTION_WINDOW_DAYS = 7
ATTENTION_MEAL_LIMIT = 5
ATTENTION_STATUSES = [ReviewStatus.PENDING.value, ReviewStatus.REQUIRES_ATTENTION.value]


def _patients_query():
    return User.query.join(Role).filter(Role.name == UserRole.PATIENT.value)


def get_assigned_patient(doctor_id: int, patient_id: int) -> Optional[User]:
    return _patients_query().filter(User.id == patient_id, User.doctor_id == doctor_id).first()


def list_assigned_patients(doctor_id: int) -> List[User]:
    return _patients_query().filter(User.doctor_id == doctor_id).order_by(User.name).all()


def assign_patient(doctor_id: int, patient_id: int) -> Optional[User]:
    patient = _patients_query().filter(User.id == patient_id).first()
    if not patient:
        return None
    patient.doctor_id = doctor_id
    db.session.commit()
    return patient


def patients_requiring_attention(doctor_id: int) -> List[Dict[str, Any]]:
    """
    Assigned patients with recent meals still pending review or flagged.

    Only meals created within the last ``ATTENTION_WINDOW_DAYS`` count, and at
    most ``ATTENTION_MEAL_LIMIT`` of them per patient.
    """
    since = datetime.utcnow() - timedelta(days=ATTENTION_WINDOW_DAYS)
    result = []
    for patient in list_assigned_patients(doctor_id):
        meals = (
            Meal.query
            .filter(
                Meal.user_id == patient.id,
                Meal.review_status.in_(ATTENTION_STATUSES),
                Meal.created_at >= since,
            )
            .order_by(Meal.created_at.desc())
            .limit(ATTENTION_MEAL_LIMIT)
            .all()
        )
        if meals:
            result.append({
                "id": patient.id,
                "name": patient.name,
                "email": patient.email,
                "created_at": iso(patient.created_at),
                "last_login": iso(patient.last_login),
                "recent_meals_requiring_attention": len(meals),
                "last_meal_date": iso(meals[0].created_at),
            })
    return result


def review_meal(meal: Meal, doctor_id: int, review: Dict[str, Any]) -> Meal:
    meal.reviewed_by = doctor_id
    meal.review_date = datetime.utcnow()
    meal.review_feedback = review.get("feedback", "")
    meal.review_recommendations = review.get("recommendations", [])
    meal.review_rating = review.get("rating", 3)
    meal.review_status = review.get("status", ReviewStatus.REVIEWED.value)
    db.session.commit()
    return meal
