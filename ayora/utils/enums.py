from enum import Enum

class UserRole(str, Enum):
    PATIENT = "patient"
    DOCTOR = "doctor"
    ADMIN = "admin"

class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    OTHER = "other"

class Unit(str, Enum):
    GRAMS = "grams"
    SERVING = "serving"
    CUP = "cup"
    PIECE = "piece"
    BOWL = "bowl"
    PLATE = "plate"
    ML = "ml"
    OZ = "oz"

class ReviewStatus(str, Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    REQUIRES_ATTENTION = "requires_attention"
    APPROVED = "approved"

class DoshaEffect(str, Enum):
    INCREASE = "increase"
    DECREASE = "decrease"
    NEUTRAL = "neutral"

class Mood(str, Enum):
    ENERGETIC = "energetic"
    TIRED = "tired"
    HAPPY = "happy"
    STRESSED = "stressed"
    NEUTRAL = "neutral"
    BLOATED = "bloated"
    LIGHT = "light"
    HEAVY = "heavy"

class Digestion(str, Enum):
    GOOD = "good"
    POOR = "poor"
    BLOATING = "bloating"
    GAS = "gas"
    CONSTIPATION = "constipation"
    DIARRHEA = "diarrhea"
    NORMAL = "normal"

BODY_TYPES = ["Vata", "Pitta", "Kapha", "Vata-Pitta", "Vata-Kapha", "Pitta-Kapha", "Tri-dosha"]
QUALITIES = ["hot", "cold", "dry", "oily", "light", "heavy", "smooth", "rough"]
TASTES = ["sweet", "sour", "salty", "bitter", "pungent", "astringent"]
POTENCIES = ["hot", "cold", "neutral"]
POST_DIGESTIVE_EFFECTS = ["sweet", "sour", "pungent"]
