import datetime as dt
from functools import wraps
from flask import request, jsonify, current_app
import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from ayora.extensions import db
from ayora.models.user import User
from ayora.utils.enums import UserRole


def hash_password(plain: str) -> str:
    return generate_password_hash(plain)


def create_token(user_id: int, role: str) -> str:
    now = dt.datetime.now(dt.timezone.utc)
    hours = current_app.config.get("JWT_EXPIRES_HOURS", 168)
    payload = {
        "sub": str(user_id),
        "role": role,
        "iat": int(now.timestamp()),
        "exp": int((now + dt.timedelta(hours=hours)).timestamp()),
    }
    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm="HS256")


def decode_token(token: str):
    return jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=["HS256"])


def _unauthorized(message: str):
    return jsonify({"error": {"code": "UNAUTHORIZED", "message": message}}), 401


def require_auth(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            return _unauthorized("Missing Bearer token")
        token = auth_header.split(" ", 1)[1]
        try:
            payload = decode_token(token)
            user_id = int(payload["sub"])
        except (jwt.PyJWTError, KeyError, ValueError):
            return _unauthorized("Invalid token")

        user = db.session.get(User, user_id)
        if not user or not user.is_active:
            return _unauthorized("Token is not valid or user is inactive")

        request.user_id = user.id  # type: ignore
        request.user_role = user.role_name  # type: ignore
        return f(*args, **kwargs)
    return wrapper


def require_role(*roles):
    allowed = {r.value if isinstance(r, UserRole) else r for r in roles}

    def decorator(f):
        @wraps(f)
        @require_auth
        def wrapper(*args, **kwargs):
            if request.user_role not in allowed:  # type: ignore
                names = ", ".join(sorted(allowed))
                return jsonify({"error": {"code": "FORBIDDEN", "message": f"Access denied. Role required: {names}"}}), 403
            return f(*args, **kwargs)
        return wrapper
    return decorator


require_doctor = require_role(UserRole.DOCTOR)
require_admin = require_role(UserRole.ADMIN)

__all__ = [
    "hash_password",
    "create_token",
    "decode_token",
    "require_auth",
    "require_role",
    "require_doctor",
    "require_admin",
    "check_password_hash",
]
