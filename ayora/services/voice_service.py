"""
Voice Service

Mock speech-to-text for meal voice notes and keyword extraction of
meal information from the transcript.
"""

import random
import re
from typing import Any, Dict, List, Optional

from ayora.services.nutrition_lookup import analyze
from ayora.utils.enums import MealType

MOCK_TRANSCRIPTIONS = [
    "I had a chicken salad for lunch with about 200 grams of grilled chicken and mixed vegetables",
    "Breakfast was oatmeal with banana and some almonds",
    "Dinner included rice, dal, and vegetables",
    "I ate two apples and a handful of nuts as a snack",
    "Had a bowl of vegetable soup with bread",
]

MEAL_TYPE_KEYWORDS = [
    (MealType.BREAKFAST, ("breakfast", "morning")),
    (MealType.LUNCH, ("lunch", "afternoon")),
    (MealType.DINNER, ("dinner", "evening")),
    (MealType.SNACK, ("snack",)),
]

COMMON_FOODS = [
    "rice", "chicken", "salad", "apple", "banana", "bread", "milk", "egg",
    "oatmeal", "almonds", "nuts", "vegetables", "dal", "soup", "fish",
    "yogurt", "cheese", "pasta", "potato", "tomato", "onion", "garlic",
]

NUMBER_WORDS = {
    "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
}

_TOKEN_RE = re.compile(r"[a-z0-9']+")
_DIGITS_RE = re.compile(r"^\d+$")


def transcribe(audio_path: str, text: Optional[str] = None) -> str:
    """Mock transcription. ``text`` short-circuits the canned transcripts."""
    if text and text.strip():
        return text.strip()
    return random.choice(MOCK_TRANSCRIPTIONS)


def detect_meal_type(text: str) -> str:
    lowered = text.lower()
    for meal_type, keywords in MEAL_TYPE_KEYWORDS:
        if any(k in lowered for k in keywords):
            return meal_type.value
    return MealType.OTHER.value


def extract_quantity(text: str, food: str) -> int:
    """
    Read the quantity spoken right before ``food``.

    The word preceding the first token that contains ``food`` is checked
    for a number word (one..ten) or a digit string. Defaults to 1.
    """
    words = _TOKEN_RE.findall(text.lower())
    index = next((i for i, word in enumerate(words) if food in word), -1)
    if index <= 0:
        return 1

    previous = words[index - 1]
    if previous in NUMBER_WORDS:
        return NUMBER_WORDS[previous]
    if _DIGITS_RE.match(previous):
        return int(previous)
    return 1


def extract_foods(text: str) -> List[Dict[str, Any]]:
    lowered = text.lower()
    return [
        {"name": food.capitalize(), "quantity": extract_quantity(lowered, food), "unit": "serving"}
        for food in COMMON_FOODS
        if food in lowered
    ]


def analyze_transcript(transcription: Optional[str]) -> Optional[Dict[str, Any]]:
    """Extract meal type, foods and nutrition totals from a transcript."""
    if not transcription:
        return None

    foods = extract_foods(transcription)
    totals = {"calories": 0, "protein": 0.0, "carbohydrates": 0.0, "fat": 0.0}
    for food in foods:
        nutrition = analyze(food["name"], food["quantity"], food["unit"])
        for key in totals:
            totals[key] += nutrition[key]

    return {
        "extracted_meals": foods,
        "meal_type": detect_meal_type(transcription),
        "nutrition": {key: round(value, 1) for key, value in totals.items()},
        "confidence": 0.8 if foods else 0.3,
    }
