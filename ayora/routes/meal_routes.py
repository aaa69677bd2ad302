from flask import Blueprint
from ayora.utils.auth import require_auth
from ayora.controllers.meal_controller import (
    list_meals_handler,
    recent_meals_handler,
    nutrition_summary_handler,
    get_meal_handler,
    create_meal_handler,
    update_meal_handler,
    delete_meal_handler,
)

meal_bp = Blueprint("meal", __name__, url_prefix="/api/meals")

@meal_bp.get("/", strict_slashes=False)
@require_auth
def list_meals():
    return list_meals_handler()


@meal_bp.post("/", strict_slashes=False)
@require_auth
def create_meal():
    return create_meal_handler()


@meal_bp.get("/recent")
@require_auth
def recent_meals():
    return recent_meals_handler()


@meal_bp.get("/nutrition-summary")
@require_auth
def nutrition_summary():
    return nutrition_summary_handler()


@meal_bp.get("/<int:meal_id>")
@require_auth
def get_meal(meal_id):
    return get_meal_handler(meal_id)


@meal_bp.put("/<int:meal_id>")
@require_auth
def update_meal(meal_id):
    return update_meal_handler(meal_id)


@meal_bp.delete("/<int:meal_id>")
@require_auth
def delete_meal(meal_id):
    return delete_meal_handler(meal_id)
