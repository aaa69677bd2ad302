from flask import request, current_app

from ayora.extensions import db
from ayora.models.meal import Meal
from ayora.schemas.meal_schema import MealReviewSchema
from ayora.services import doctor_service, meal_service
from ayora.utils.http import ok, error, json_body, validate_schema, arg_int, arg_str, parse_iso_datetime, iso

NOT_ASSIGNED = "Patient not found or not assigned to you"


def patients_requiring_attention_handler():
    return ok(doctor_service.patients_requiring_attention(request.user_id))


def patient_meals_handler(patient_id: int):
    if not doctor_service.get_assigned_patient(request.user_id, patient_id):
        return error("NOT_FOUND", NOT_ASSIGNED, 404)

    meals, pagination = meal_service.list_meals(
        patient_id,
        page=arg_int("page", 1, min_value=1),
        limit=arg_int("limit", 20, min_value=1, max_value=100),
        start_date=parse_iso_datetime(arg_str("start_date")),
        end_date=parse_iso_datetime(arg_str("end_date")),
        sort="-meal_date",
    )
    return ok({
        "items": [meal_service.serialize_meal(m) for m in meals],
        "pagination": pagination,
    })


def patient_nutrition_summary_handler(patient_id: int):
    if not doctor_service.get_assigned_patient(request.user_id, patient_id):
        return error("NOT_FOUND", NOT_ASSIGNED, 404)

    start, end = meal_service.resolve_period(arg_str("start_date"), arg_str("end_date"))
    return ok({
        "summary": meal_service.nutrition_summary(patient_id, start, end),
        "meal_type_breakdown": meal_service.meal_type_breakdown(patient_id, start, end),
        "period": {"start_date": iso(start), "end_date": iso(end)},
    })


def assign_patient_handler():
    data = json_body()
    try:
        patient_id = int(data.get("patient_id"))
    except (TypeError, ValueError):
        return error("VALIDATION_ERROR", "patient_id is required", 400)

    patient = doctor_service.assign_patient(request.user_id, patient_id)
    if not patient:
        return error("NOT_FOUND", "Patient not found", 404)

    current_app.logger.info(f"Patient {patient.id} assigned to doctor {request.user_id}")
    return ok({
        "message": "Patient assigned successfully",
        "patient": {"id": patient.id, "name": patient.name, "email": patient.email, "doctor_id": patient.doctor_id},
    })


def review_meal_handler(meal_id: int):
    meal = db.session.get(Meal, meal_id)
    if not meal:
        return error("NOT_FOUND", "Meal not found", 404)

    if not doctor_service.get_assigned_patient(request.user_id, meal.user_id):
        return error("FORBIDDEN", "You are not authorized to review this meal", 403)

    data, errors = validate_schema(MealReviewSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid review data", 400, details=errors)

    try:
        meal = doctor_service.review_meal(meal, request.user_id, data)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error reviewing meal {meal_id}: {e}")
        return error("UNKNOWN_ERROR", "Failed to review meal", 500)

    return ok(meal_service.serialize_meal(meal))
