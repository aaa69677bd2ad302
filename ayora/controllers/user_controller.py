from datetime import datetime
from flask import request, current_app
from sqlalchemy import or_
from ayora.extensions import db
from ayora.models.user import User
from ayora.models.role import Role
from ayora.schemas.user_schema import ProfileUpdateSchema, ChangePasswordSchema
from ayora.services.doctor_service import list_assigned_patients
from ayora.utils.auth import create_token, check_password_hash, hash_password
from ayora.utils.enums import UserRole
from ayora.utils.http import ok, error, json_body, validate_schema, arg_int, arg_str, iso, like_pattern, LIKE_ESCAPE

SELF_ASSIGNABLE_ROLES = {UserRole.PATIENT.value, UserRole.DOCTOR.value}
MIN_PASSWORD_LENGTH = 6
PROFILE_FIELDS = [
    "age", "gender", "height_cm", "weight_kg", "medical_conditions", "allergies",
    "ayurvedic_body_type", "dietary_preferences", "emergency_contact",
]


def _float_or_none(value):
    return float(value) if value is not None else None


def serialize_profile(user: User):
    return {
        "age": user.age,
        "gender": user.gender,
        "height_cm": _float_or_none(user.height_cm),
        "weight_kg": _float_or_none(user.weight_kg),
        "medical_conditions": user.medical_conditions or [],
        "allergies": user.allergies or [],
        "ayurvedic_body_type": user.ayurvedic_body_type,
        "dietary_preferences": user.dietary_preferences or [],
        "emergency_contact": user.emergency_contact,
    }


def serialize_user(user: User, with_profile: bool = False):
    data = {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role_name,
        "is_active": user.is_active,
        "doctor_id": user.doctor_id,
        "last_login": iso(user.last_login),
        "created_at": iso(user.created_at),
    }
    if with_profile:
        data["profile"] = serialize_profile(user)
    return data


def _auth_payload(user: User):
    return {
        "token": create_token(user.id, user.role_name),
        "user": serialize_user(user, with_profile=True),
    }


def _string_fields(data, *names):
    """Return the named body fields as strings (missing or null as ""), or None if any is not a string."""
    values = {}
    for name in names:
        value = data.get(name)
        if value is None:
            value = ""
        if not isinstance(value, str):
            return None
        values[name] = value
    return values


def register_handler():
    fields = _string_fields(json_body(), "name", "email", "password", "role")
    if fields is None:
        return error("VALIDATION_ERROR", "name, email, password and role must be strings", 400)
    name = fields["name"].strip()
    email = fields["email"].strip().lower()
    password = fields["password"]
    role_name = (fields["role"] or UserRole.PATIENT.value).strip().lower()

    if not name or not email or not password:
        return error("VALIDATION_ERROR", "name, email and password required", 400)
    if "@" not in email or " " in email:
        return error("VALIDATION_ERROR", "Please enter a valid email", 400)
    if len(name) > 50:
        return error("VALIDATION_ERROR", "name cannot exceed 50 characters", 400)
    if len(password) < MIN_PASSWORD_LENGTH:
        return error("VALIDATION_ERROR", f"password must be at least {MIN_PASSWORD_LENGTH} characters", 400)
    if role_name not in SELF_ASSIGNABLE_ROLES:
        return error("VALIDATION_ERROR", f"role must be one of: {', '.join(sorted(SELF_ASSIGNABLE_ROLES))}", 400)

    if User.query.filter_by(email=email).first():
        return error("EMAIL_IN_USE", "email already registered", 409)

    role = Role.query.filter_by(name=role_name).first()
    if not role:
        return error("ROLE_NOT_FOUND", f"Role '{role_name}' not found", 400)

    try:
        user = User(name=name, email=email, password=hash_password(password), role=role)
        db.session.add(user)
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Registration failed for {email}: {e}")
        return error("UNKNOWN_ERROR", "Registration failed", 500)

    current_app.logger.info(f"Registered {role_name} user {user.id}")
    return ok(_auth_payload(user), 201)


def login_handler():
    fields = _string_fields(json_body(), "email", "password")
    if fields is None:
        return error("VALIDATION_ERROR", "email and password must be strings", 400)
    email = fields["email"].strip().lower()
    password = fields["password"]
    if not email or not password:
        return error("VALIDATION_ERROR", "email and password required", 400)

    user = User.query.filter_by(email=email).first()
    if not user or not check_password_hash(user.password, password):
        return error("INVALID_CREDENTIALS", "Email or password incorrect", 401)
    if not user.is_active:
        return error("ACCOUNT_INACTIVE", "Account is deactivated", 403)

    user.last_login = datetime.utcnow()
    db.session.commit()
    return ok(_auth_payload(user))


def get_profile_handler():
    user = db.session.get(User, request.user_id)
    if not user:
        return error("NOT_FOUND", "User not found", 404)
    return ok(serialize_user(user, with_profile=True))


def update_profile_handler():
    user = db.session.get(User, request.user_id)
    if not user:
        return error("NOT_FOUND", "User not found", 404)

    data, errors = validate_schema(ProfileUpdateSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid profile data", 400, details=errors)

    if "name" in data:
        user.name = data["name"]
    for field in PROFILE_FIELDS:
        if field in data.get("profile", {}):
            setattr(user, field, data["profile"][field])

    try:
        db.session.commit()
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Profile update failed for user {user.id}: {e}")
        return error("UNKNOWN_ERROR", "Failed to update profile", 500)
    return ok(serialize_user(user, with_profile=True))


def change_password_handler():
    user = db.session.get(User, request.user_id)
    if not user:
        return error("NOT_FOUND", "User not found", 404)

    data, errors = validate_schema(ChangePasswordSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid password data", 400, details=errors)
    if not check_password_hash(user.password, data["current_password"]):
        return error("INVALID_CREDENTIALS", "Current password is incorrect", 401)

    user.password = hash_password(data["new_password"])
    db.session.commit()
    return ok({"message": "Password changed successfully"})


def list_patients_handler():
    patients = list_assigned_patients(request.user_id)
    return ok([serialize_user(p, with_profile=True) for p in patients])


def list_users_handler():
    page = arg_int("page", 1, min_value=1)
    limit = arg_int("limit", 10, min_value=1, max_value=100)
    search = arg_str("search")
    role_filter = arg_str("role")

    query = User.query

    if search:
        term = like_pattern(search)
        query = query.filter(or_(User.name.ilike(term, escape=LIKE_ESCAPE), User.email.ilike(term, escape=LIKE_ESCAPE)))

    if role_filter:
        query = query.join(Role).filter(Role.name == role_filter.lower())

    pagination = query.order_by(User.id).paginate(page=page, per_page=limit, error_out=False)

    return ok({
        "items": [serialize_user(u) for u in pagination.items],
        "total": pagination.total,
        "page": page,
        "limit": limit,
        "pages": pagination.pages,
    })
