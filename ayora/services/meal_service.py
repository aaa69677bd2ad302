"""
Meal Service

Handles meal journal operations: creation with nutrition analysis,
filtered listing, updates, deletion and nutrition summaries.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func, or_

from ayora.extensions import db
from ayora.models.meal import Meal
from ayora.services.ai_client import NutritionClient
from ayora.services.nutrition_lookup import NUTRIENT_KEYS
from ayora.utils.enums import DoshaEffect
from ayora.utils.http import LIKE_ESCAPE, iso, like_pattern, parse_iso_datetime

DEFAULT_SUMMARY_DAYS = 30
RECENT_MEALS_LIMIT = 3

SORT_COLUMNS = {
    "meal_date": Meal.meal_date,
    "created_at": Meal.created_at,
    "food_name": Meal.food_name,
    "calories": Meal.calories,
}

SIMPLE_FIELDS = [
    "meal_type", "food_name", "description", "quantity", "unit",
    "image_data", "voice_data", "tags", "is_favorite", "location",
]


def _num(value) -> float:
    return float(value) if value is not None else 0.0


def serialize_nutrition(meal: Meal) -> Dict[str, float]:
    return {key: _num(getattr(meal, key)) for key in NUTRIENT_KEYS}


def serialize_meal(meal: Meal) -> Dict[str, Any]:
    reviewer = meal.reviewer
    return {
        "id": meal.id,
        "user_id": meal.user_id,
        "meal_type": meal.meal_type,
        "food_name": meal.food_name,
        "description": meal.description,
        "quantity": _num(meal.quantity),
        "unit": meal.unit,
        "nutrition": serialize_nutrition(meal),
        "ayurvedic_tag": meal.ayurvedic_tag,
        "ayurvedic_properties": meal.ayurvedic_properties or {
            "dosha_effect": {d: DoshaEffect.NEUTRAL.value for d in ("vata", "pitta", "kapha")}
        },
        "image_data": meal.image_data,
        "voice_data": meal.voice_data,
        "journal_entry": {
            "mood": meal.mood,
            "energy_level": meal.energy_level,
            "digestion": meal.digestion,
            "notes": meal.notes,
        },
        "servings": {
            "planned": _num(meal.servings_planned),
            "consumed": _num(meal.servings_consumed),
            "remaining": _num(meal.servings_remaining),
        },
        "doctor_review": {
            "reviewed_by": {"id": reviewer.id, "name": reviewer.name} if reviewer else None,
            "review_date": iso(meal.review_date),
            "feedback": meal.review_feedback,
            "recommendations": meal.review_recommendations or [],
            "rating": meal.review_rating,
            "status": meal.review_status,
        },
        "tags": meal.tags or [],
        "is_favorite": meal.is_favorite,
        "meal_date": iso(meal.meal_date),
        "location": meal.location,
        "nutrition_score": round(meal.nutrition_score, 1),
        "created_at": iso(meal.created_at),
        "updated_at": iso(meal.updated_at),
    }


def serialize_recent(meal: Meal) -> Dict[str, Any]:
    return {
        "id": meal.id,
        "food_name": meal.food_name,
        "meal_type": meal.meal_type,
        "calories": _num(meal.calories),
        "meal_date": iso(meal.meal_date),
        "image_url": (meal.image_data or {}).get("url"),
    }


def apply_meal_fields(meal: Meal, data: Dict[str, Any]) -> None:
    """Copy validated request fields onto the meal columns."""
    for field in SIMPLE_FIELDS:
        if field in data:
            setattr(meal, field, data[field])

    if data.get("nutrition"):
        for key, value in data["nutrition"].items():
            setattr(meal, key, value)

    if "ayurvedic_properties" in data:
        meal.ayurvedic_properties = data["ayurvedic_properties"]

    journal = data.get("journal_entry")
    if journal:
        for key in ("mood", "energy_level", "digestion", "notes"):
            if key in journal:
                setattr(meal, key, journal[key])

    servings = data.get("servings")
    if servings:
        if "planned" in servings:
            meal.servings_planned = servings["planned"]
        if "consumed" in servings:
            meal.servings_consumed = servings["consumed"]

    if data.get("meal_date"):
        meal.meal_date = parse_iso_datetime(data["meal_date"])


def create_meal(user_id: int, data: Dict[str, Any], nutrition_client: NutritionClient) -> Meal:
    """
    Create a meal entry for a user.

    When the supplied nutrition carries no calories, the AI service is
    asked for an analysis and its values are merged over the supplied ones.

    Args:
        user_id: Owner of the meal
        data: Validated payload from ``MealSchema``
        nutrition_client: Client for the nutrition analysis service

    Returns:
        The persisted Meal
    """
    nutrition = dict(data.get("nutrition") or {})
    if not nutrition.get("calories"):
        analysis = nutrition_client.analyze(data["food_name"], data.get("quantity", 1), data.get("unit", "serving"))
        meal_tag = analysis.pop("ayurvedic_tag", None)
        nutrition.update(analysis)
    else:
        meal_tag = None

    meal = Meal(user_id=user_id, ayurvedic_tag=meal_tag)
    apply_meal_fields(meal, {**data, "nutrition": nutrition})

    db.session.add(meal)
    db.session.commit()
    return meal


def get_user_meal(user_id: int, meal_id: int) -> Optional[Meal]:
    return Meal.query.filter_by(id=meal_id, user_id=user_id).first()


def update_meal(meal: Meal, data: Dict[str, Any]) -> Meal:
    apply_meal_fields(meal, data)
    db.session.commit()
    return meal


def delete_meal(meal: Meal) -> None:
    db.session.delete(meal)
    db.session.commit()


def _ordering(sort: Optional[str]):
    sort = (sort or "-created_at").strip()
    descending = sort.startswith("-")
    column = SORT_COLUMNS.get(sort.lstrip("-+"), Meal.created_at)
    primary = column.desc() if descending else column.asc()
    tiebreak = Meal.id.desc() if descending else Meal.id.asc()
    return primary, tiebreak


def list_meals(
    user_id: int,
    page: int = 1,
    limit: int = 10,
    meal_type: Optional[str] = None,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    search: Optional[str] = None,
    sort: Optional[str] = None,
) -> Tuple[List[Meal], Dict[str, Any]]:
    """List a user's meals with filters, returning ``(meals, pagination)``."""
    query = Meal.query.filter(Meal.user_id == user_id)

    if meal_type:
        query = query.filter(Meal.meal_type == meal_type)
    if start_date:
        query = query.filter(Meal.meal_date >= start_date)
    if end_date:
        query = query.filter(Meal.meal_date <= end_date)
    if search:
        term = like_pattern(search)
        query = query.filter(or_(
            Meal.food_name.ilike(term, escape=LIKE_ESCAPE),
            Meal.description.ilike(term, escape=LIKE_ESCAPE),
        ))

    pagination = query.order_by(*_ordering(sort)).paginate(page=page, per_page=limit, error_out=False)
    total_pages = pagination.pages or 0
    return pagination.items, {
        "current_page": page,
        "total_pages": total_pages,
        "total_meals": pagination.total,
        "has_next": page < total_pages,
        "has_prev": page > 1,
    }


def recent_meals(user_id: int, limit: int = RECENT_MEALS_LIMIT) -> List[Meal]:
    return (
        Meal.query
        .filter_by(user_id=user_id)
        .order_by(Meal.created_at.desc(), Meal.id.desc())
        .limit(limit)
        .all()
    )


def resolve_period(start_date: Optional[str], end_date: Optional[str]) -> Tuple[datetime, datetime]:
    end = parse_iso_datetime(end_date) or datetime.utcnow()
    start = parse_iso_datetime(start_date) or (datetime.utcnow() - timedelta(days=DEFAULT_SUMMARY_DAYS))
    return start, end


def nutrition_summary(user_id: int, start: datetime, end: datetime) -> Dict[str, Any]:
    row = (
        db.session.query(
            func.coalesce(func.sum(Meal.calories), 0),
            func.coalesce(func.sum(Meal.protein), 0),
            func.coalesce(func.sum(Meal.carbohydrates), 0),
            func.coalesce(func.sum(Meal.fat), 0),
            func.count(Meal.id),
        )
        .filter(Meal.user_id == user_id, Meal.meal_date >= start, Meal.meal_date <= end)
        .one()
    )
    return {
        "total_calories": round(float(row[0]), 1),
        "total_protein": round(float(row[1]), 1),
        "total_carbs": round(float(row[2]), 1),
        "total_fat": round(float(row[3]), 1),
        "meal_count": int(row[4]),
    }


def meal_type_breakdown(user_id: int, start: datetime, end: datetime) -> List[Dict[str, Any]]:
    rows = (
        db.session.query(
            Meal.meal_type,
            func.count(Meal.id),
            func.avg(Meal.calories),
            func.sum(Meal.calories),
        )
        .filter(Meal.user_id == user_id, Meal.meal_date >= start, Meal.meal_date <= end)
        .group_by(Meal.meal_type)
        .order_by(Meal.meal_type)
        .all()
    )
    return [
        {
            "meal_type": meal_type,
            "count": int(count),
            "avg_calories": round(float(avg or 0), 1),
            "total_calories": round(float(total or 0), 1),
        }
        for meal_type, count, avg, total in rows
    ]
