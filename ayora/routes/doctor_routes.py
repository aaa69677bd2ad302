from flask import Blueprint
from ayora.utils.auth import require_doctor
from ayora.controllers.doctor_controller import (
    patients_requiring_attention_handler,
    patient_meals_handler,
    patient_nutrition_summary_handler,
    assign_patient_handler,
    review_meal_handler,
)

doctor_bp = Blueprint("doctor", __name__, url_prefix="/api/doctors")

@doctor_bp.get("/patients/requiring-attention")
@require_doctor
def patients_requiring_attention():
    return patients_requiring_attention_handler()


@doctor_bp.get("/patients/<int:patient_id>/meals")
@require_doctor
def patient_meals(patient_id):
    return patient_meals_handler(patient_id)


@doctor_bp.get("/patients/<int:patient_id>/nutrition-summary")
@require_doctor
def patient_nutrition_summary(patient_id):
    return patient_nutrition_summary_handler(patient_id)


@doctor_bp.post("/patients/assign")
@require_doctor
def assign_patient():
    return assign_patient_handler()


@doctor_bp.post("/meals/<int:meal_id>/review")
@require_doctor
def review_meal(meal_id):
    return review_meal_handler(meal_id)
