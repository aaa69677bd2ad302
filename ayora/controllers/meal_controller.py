"""
Meal Controller Module

Handles the meal journal endpoints of the current user.
"""

from flask import request, current_app

from ayora.extensions import db
from ayora.schemas.meal_schema import MealSchema
from ayora.services import meal_service
from ayora.services.ai_client import get_nutrition_client
from ayora.utils.enums import MealType
from ayora.utils.http import ok, error, json_body, validate_schema, arg_int, arg_str, parse_iso_datetime, iso

MEAL_TYPES = {e.value for e in MealType}


def list_meals_handler():
    """
    List the current user's meals.

    Query Parameters:
        - page, limit: Pagination (limit 1..100, default 10)
        - meal_type: Filter by meal type
        - start_date, end_date: ISO bounds on meal_date
        - search: Case-insensitive match on food name or description
        - sort: [-]meal_date, [-]created_at, [-]food_name, [-]calories
    """
    meal_type = arg_str("meal_type")
    if meal_type and meal_type not in MEAL_TYPES:
        return error("VALIDATION_ERROR", f"meal_type must be one of: {', '.join(sorted(MEAL_TYPES))}", 400)

    meals, pagination = meal_service.list_meals(
        request.user_id,
        page=arg_int("page", 1, min_value=1),
        limit=arg_int("limit", 10, min_value=1, max_value=100),
        meal_type=meal_type,
        start_date=parse_iso_datetime(arg_str("start_date")),
        end_date=parse_iso_datetime(arg_str("end_date")),
        search=arg_str("search"),
        sort=arg_str("sort"),
    )
    return ok({
        "items": [meal_service.serialize_meal(m) for m in meals],
        "pagination": pagination,
    })


def recent_meals_handler():
    meals = meal_service.recent_meals(request.user_id)
    return ok([meal_service.serialize_recent(m) for m in meals])


def nutrition_summary_handler():
    start, end = meal_service.resolve_period(arg_str("start_date"), arg_str("end_date"))
    summary = meal_service.nutrition_summary(request.user_id, start, end)
    return ok({
        **summary,
        "period": {"start_date": iso(start), "end_date": iso(end)},
    })


def get_meal_handler(meal_id: int):
    meal = meal_service.get_user_meal(request.user_id, meal_id)
    if not meal:
        return error("NOT_FOUND", "Meal not found", 404)
    return ok(meal_service.serialize_meal(meal))


def create_meal_handler():
    data, errors = validate_schema(MealSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid meal data", 400, details=errors)

    try:
        meal = meal_service.create_meal(request.user_id, data, get_nutrition_client())
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error creating meal: {e}")
        return error("UNKNOWN_ERROR", "Failed to create meal", 500)

    return ok(meal_service.serialize_meal(meal), 201)


def update_meal_handler(meal_id: int):
    meal = meal_service.get_user_meal(request.user_id, meal_id)
    if not meal:
        return error("NOT_FOUND", "Meal not found", 404)

    data, errors = validate_schema(MealSchema, json_body(), partial=True)
    if errors:
        return error("VALIDATION_ERROR", "Invalid meal data", 400, details=errors)

    try:
        meal = meal_service.update_meal(meal, data)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error updating meal {meal_id}: {e}")
        return error("UNKNOWN_ERROR", "Failed to update meal", 500)

    return ok(meal_service.serialize_meal(meal))


def delete_meal_handler(meal_id: int):
    meal = meal_service.get_user_meal(request.user_id, meal_id)
    if not meal:
        return error("NOT_FOUND", "Meal not found", 404)

    try:
        meal_service.delete_meal(meal)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting meal {meal_id}: {e}")
        return error("UNKNOWN_ERROR", "Failed to delete meal", 500)

    return ok({"message": "Meal deleted successfully"})
