from marshmallow import Schema, fields, validate, EXCLUDE
from ayora.utils.enums import (
    MealType, Unit, ReviewStatus, DoshaEffect, Mood, Digestion,
    QUALITIES, TASTES, POTENCIES, POST_DIGESTIVE_EFFECTS,
)

def _values(enum_cls):
    return [e.value for e in enum_cls]

NON_NEGATIVE = validate.Range(min=0)

class NutritionSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    calories = fields.Float(validate=NON_NEGATIVE)
    protein = fields.Float(validate=NON_NEGATIVE)
    carbohydrates = fields.Float(validate=NON_NEGATIVE)
    fat = fields.Float(validate=NON_NEGATIVE)
    fiber = fields.Float(validate=NON_NEGATIVE)
    sugar = fields.Float(validate=NON_NEGATIVE)
    sodium = fields.Float(validate=NON_NEGATIVE)

class DoshaEffectSchema(Schema):
    vata = fields.Str(load_default=DoshaEffect.NEUTRAL.value, validate=validate.OneOf(_values(DoshaEffect)))
    pitta = fields.Str(load_default=DoshaEffect.NEUTRAL.value, validate=validate.OneOf(_values(DoshaEffect)))
    kapha = fields.Str(load_default=DoshaEffect.NEUTRAL.value, validate=validate.OneOf(_values(DoshaEffect)))

class AyurvedicPropertiesSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    dosha_effect = fields.Nested(DoshaEffectSchema)
    qualities = fields.List(fields.Str(validate=validate.OneOf(QUALITIES)))
    taste = fields.List(fields.Str(validate=validate.OneOf(TASTES)))
    potency = fields.Str(validate=validate.OneOf(POTENCIES))
    post_digestive_effect = fields.Str(validate=validate.OneOf(POST_DIGESTIVE_EFFECTS))

class MediaSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    filename = fields.Str()
    original_name = fields.Str()
    url = fields.Str()
    content_type = fields.Str()
    size = fields.Int()
    transcription = fields.Str(allow_none=True)
    confidence = fields.Float(allow_none=True)

class JournalEntrySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    mood = fields.Str(allow_none=True, validate=validate.OneOf(_values(Mood)))
    energy_level = fields.Int(validate=validate.Range(min=1, max=10))
    digestion = fields.Str(allow_none=True, validate=validate.OneOf(_values(Digestion)))
    notes = fields.Str(allow_none=True, validate=validate.Length(max=1000))

class ServingsSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    planned = fields.Float(validate=NON_NEGATIVE)
    consumed = fields.Float(validate=NON_NEGATIVE)

class MealSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    meal_type = fields.Str(load_default=MealType.OTHER.value, validate=validate.OneOf(_values(MealType)))
    food_name = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    description = fields.Str(allow_none=True, validate=validate.Length(max=500))
    quantity = fields.Float(required=True, validate=NON_NEGATIVE)
    unit = fields.Str(load_default=Unit.SERVING.value, validate=validate.OneOf(_values(Unit)))
    nutrition = fields.Nested(NutritionSchema, load_default=dict)
    ayurvedic_properties = fields.Nested(AyurvedicPropertiesSchema, allow_none=True)
    image_data = fields.Nested(MediaSchema, allow_none=True)
    voice_data = fields.Nested(MediaSchema, allow_none=True)
    journal_entry = fields.Nested(JournalEntrySchema, allow_none=True)
    servings = fields.Nested(ServingsSchema, allow_none=True)
    tags = fields.List(fields.Str())
    is_favorite = fields.Bool()
    meal_date = fields.DateTime(allow_none=True)
    location = fields.Str(allow_none=True, validate=validate.Length(max=100))

class MealReviewSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    feedback = fields.Str(load_default="")
    recommendations = fields.List(fields.Str(), load_default=list)
    rating = fields.Int(load_default=3, validate=validate.Range(min=1, max=5))
    status = fields.Str(load_default=ReviewStatus.REVIEWED.value, validate=validate.OneOf(_values(ReviewStatus)))
