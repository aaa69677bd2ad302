"""
Nutrition Lookup

Keyword-based nutrition facts table shared by the AI stub service and the
voice analysis. Values are per 100 g.
"""

from typing import Dict, Any, Tuple

NUTRIENT_KEYS = ("calories", "protein", "carbohydrates", "fat", "fiber", "sugar", "sodium")

# Order matters: the first key contained in the food name wins
FOOD_DATABASE: Dict[str, Dict[str, Any]] = {
    "rice": {"calories": 130, "protein": 2.7, "carbohydrates": 28, "fat": 0.3, "fiber": 0.4, "sugar": 0.1, "sodium": 1, "ayurvedic_tag": "neutral"},
    "chicken": {"calories": 165, "protein": 31, "carbohydrates": 0, "fat": 3.6, "fiber": 0, "sugar": 0, "sodium": 74, "ayurvedic_tag": "protein"},
    "apple": {"calories": 52, "protein": 0.3, "carbohydrates": 14, "fat": 0.2, "fiber": 2.4, "sugar": 10, "sodium": 1, "ayurvedic_tag": "sweet"},
    "bread": {"calories": 79, "protein": 2.7, "carbohydrates": 15, "fat": 1, "fiber": 0.8, "sugar": 1.6, "sodium": 146, "ayurvedic_tag": "heavy"},
    "milk": {"calories": 42, "protein": 3.4, "carbohydrates": 5, "fat": 1, "fiber": 0, "sugar": 5, "sodium": 44, "ayurvedic_tag": "cooling"},
    "egg": {"calories": 155, "protein": 13, "carbohydrates": 1.1, "fat": 11, "fiber": 0, "sugar": 1.1, "sodium": 124, "ayurvedic_tag": "protein"},
    "banana": {"calories": 89, "protein": 1.1, "carbohydrates": 23, "fat": 0.3, "fiber": 2.6, "sugar": 12, "sodium": 1, "ayurvedic_tag": "sweet"},
    "salad": {"calories": 15, "protein": 1.4, "carbohydrates": 3, "fat": 0.2, "fiber": 1.5, "sugar": 1.4, "sodium": 28, "ayurvedic_tag": "light"},
    "oatmeal": {"calories": 68, "protein": 2.4, "carbohydrates": 12, "fat": 1.4, "fiber": 1.6, "sugar": 0.5, "sodium": 1, "ayurvedic_tag": "grounding"},
    "almonds": {"calories": 164, "protein": 6, "carbohydrates": 6, "fat": 14, "fiber": 3.5, "sugar": 1.2, "sodium": 1, "ayurvedic_tag": "heating"},
    "nuts": {"calories": 200, "protein": 5, "carbohydrates": 4, "fat": 20, "fiber": 2, "sugar": 1, "sodium": 2, "ayurvedic_tag": "heating"},
    "vegetables": {"calories": 25, "protein": 2, "carbohydrates": 5, "fat": 0.2, "fiber": 2.5, "sugar": 2, "sodium": 30, "ayurvedic_tag": "light"},
    "dal": {"calories": 120, "protein": 8, "carbohydrates": 20, "fat": 1, "fiber": 4, "sugar": 2, "sodium": 200, "ayurvedic_tag": "astringent"},
    "soup": {"calories": 80, "protein": 3, "carbohydrates": 12, "fat": 2, "fiber": 2, "sugar": 4, "sodium": 600, "ayurvedic_tag": "warming"},
    "fish": {"calories": 140, "protein": 25, "carbohydrates": 0, "fat": 5, "fiber": 0, "sugar": 0, "sodium": 60, "ayurvedic_tag": "protein"},
    "yogurt": {"calories": 61, "protein": 3.5, "carbohydrates": 4.7, "fat": 3.3, "fiber": 0, "sugar": 4.7, "sodium": 46, "ayurvedic_tag": "cooling"},
    "cheese": {"calories": 113, "protein": 7, "carbohydrates": 1, "fat": 9, "fiber": 0, "sugar": 0.5, "sodium": 174, "ayurvedic_tag": "heavy"},
    "pasta": {"calories": 131, "protein": 5, "carbohydrates": 25, "fat": 1, "fiber": 1.5, "sugar": 1, "sodium": 1, "ayurvedic_tag": "heavy"},
    "potato": {"calories": 77, "protein": 2, "carbohydrates": 17, "fat": 0.1, "fiber": 2.2, "sugar": 0.8, "sodium": 6, "ayurvedic_tag": "grounding"},
    "tomato": {"calories": 18, "protein": 0.9, "carbohydrates": 3.9, "fat": 0.2, "fiber": 1.2, "sugar": 2.6, "sodium": 5, "ayurvedic_tag": "sour"},
    "onion": {"calories": 40, "protein": 1.1, "carbohydrates": 9, "fat": 0.1, "fiber": 1.7, "sugar": 4.2, "sodium": 4, "ayurvedic_tag": "pungent"},
    "garlic": {"calories": 149, "protein": 6.4, "carbohydrates": 33, "fat": 0.5, "fiber": 2.1, "sugar": 1, "sodium": 17, "ayurvedic_tag": "pungent"},
    "spinach": {"calories": 23, "protein": 2.9, "carbohydrates": 3.6, "fat": 0.4, "fiber": 2.2, "sugar": 0.4, "sodium": 79, "ayurvedic_tag": "bitter"},
}

DEFAULT_NUTRITION: Dict[str, Any] = {
    "calories": 100, "protein": 2, "carbohydrates": 20, "fat": 2,
    "fiber": 2, "sugar": 5, "sodium": 50, "ayurvedic_tag": "unknown",
}

GRAMS_PER_PORTION = 100.0
GRAMS_PER_OZ = 28.35
MASS_UNITS = {"grams": 1.0, "ml": 1.0, "oz": GRAMS_PER_OZ}


def lookup(food_name: str) -> Tuple[str, Dict[str, Any]]:
    """Return ``(matched_key, facts)``; ``matched_key`` is ``"default"`` when nothing matches."""
    name = (food_name or "").lower()
    for key, facts in FOOD_DATABASE.items():
        if key in name:
            return key, facts
    return "default", DEFAULT_NUTRITION


def to_grams(quantity: float, unit: str) -> float:
    """Convert a quantity to grams. Count units are one 100 g portion each."""
    qty = float(quantity or 0)
    factor = MASS_UNITS.get((unit or "").lower())
    if factor is None:
        return qty * GRAMS_PER_PORTION
    return qty * factor


def scale(facts: Dict[str, Any], grams: float) -> Dict[str, Any]:
    factor = grams / 100.0
    return {
        "calories": round(facts["calories"] * factor),
        "protein": round(facts["protein"] * factor, 1),
        "carbohydrates": round(facts["carbohydrates"] * factor, 1),
        "fat": round(facts["fat"] * factor, 1),
        "fiber": round(facts["fiber"] * factor, 1),
        "sugar": round(facts["sugar"] * factor, 1),
        "sodium": round(facts["sodium"] * factor),
    }


def analyze(food_name: str, quantity: float = 1, unit: str = "serving") -> Dict[str, Any]:
    _, facts = lookup(food_name)
    result = scale(facts, to_grams(quantity, unit))
    result["ayurvedic_tag"] = facts["ayurvedic_tag"]
    return result


def empty_nutrition() -> Dict[str, Any]:
    result: Dict[str, Any] = {key: 0 for key in NUTRIENT_KEYS}
    result["ayurvedic_tag"] = "unknown"
    return result
