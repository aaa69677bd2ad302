"""
Image Analysis Service

Mock food recognition for uploaded meal photos. Replace with a real
vision service integration.
"""

import copy
from typing import Any, Dict, Optional

from ayora.services.nutrition_lookup import analyze

MOCK_ANALYSIS: Dict[str, Any] = {
    "identified_foods": [
        {"name": "Grilled Chicken Salad", "confidence": 0.85, "quantity": 1, "unit": "serving"}
    ],
    "nutrition": {
        "calories": 320,
        "protein": 25,
        "carbohydrates": 15,
        "fat": 18,
        "fiber": 6,
        "sugar": 8,
        "sodium": 450,
    },
    "ayurvedic_properties": {
        "dosha_effect": {"vata": "decrease", "pitta": "neutral", "kapha": "decrease"},
        "qualities": ["light", "dry"],
        "taste": ["bitter", "astringent"],
        "potency": "cold",
    },
}


def analyze_food_image(image_path: str, food_name: Optional[str] = None) -> Dict[str, Any]:
    """Return a canned analysis; a caller-supplied ``food_name`` is looked up instead."""
    result = copy.deepcopy(MOCK_ANALYSIS)
    name = (food_name or "").strip()
    if name:
        nutrition = analyze(name, 1, "serving")
        tag = nutrition.pop("ayurvedic_tag")
        result["identified_foods"] = [{"name": name, "confidence": 0.95, "quantity": 1, "unit": "serving"}]
        result["nutrition"] = nutrition
        result["ayurvedic_tag"] = tag
    return result
