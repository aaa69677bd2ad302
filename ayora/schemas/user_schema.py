from marshmallow import Schema, fields, validate, pre_load, EXCLUDE
from ayora.utils.enums import BODY_TYPES

class EmergencyContactSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(allow_none=True)
    phone = fields.Str(allow_none=True)
    relationship = fields.Str(allow_none=True)

class ProfileSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    age = fields.Int(allow_none=True, validate=validate.Range(min=0, max=130))
    gender = fields.Str(allow_none=True, validate=validate.Length(max=20))
    height_cm = fields.Float(allow_none=True, validate=validate.Range(min=30, max=300))
    weight_kg = fields.Float(allow_none=True, validate=validate.Range(min=1, max=500))
    medical_conditions = fields.List(fields.Str())
    allergies = fields.List(fields.Str())
    ayurvedic_body_type = fields.Str(allow_none=True, validate=validate.OneOf(BODY_TYPES))
    dietary_preferences = fields.List(fields.Str())
    emergency_contact = fields.Nested(EmergencyContactSchema, allow_none=True)

class ProfileUpdateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(validate=validate.Length(min=1, max=50))
    profile = fields.Nested(ProfileSchema)

    @pre_load
    def strip_name(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get("name"), str):
            data = {**data, "name": data["name"].strip()}
        return data

class ChangePasswordSchema(Schema):
    current_password = fields.Str(required=True)
    new_password = fields.Str(required=True, validate=validate.Length(min=6))
