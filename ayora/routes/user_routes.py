from flask import Blueprint
from ayora.utils.auth import require_auth, require_doctor, require_admin
from ayora.controllers.user_controller import (
    register_handler,
    login_handler,
    get_profile_handler,
    update_profile_handler,
    change_password_handler,
    list_patients_handler,
    list_users_handler,
)

user_bp = Blueprint("user", __name__, url_prefix="/api/users")

@user_bp.post("/register")
def register():
    return register_handler()


@user_bp.post("/login")
def login():
    return login_handler()


@user_bp.get("/profile")
@require_auth
def get_profile():
    return get_profile_handler()


@user_bp.put("/profile")
@require_auth
def update_profile():
    return update_profile_handler()


@user_bp.put("/change-password")
@require_auth
def change_password():
    return change_password_handler()


@user_bp.get("/patients")
@require_doctor
def list_patients():
    return list_patients_handler()


@user_bp.get("/", strict_slashes=False)
@require_admin
def list_users():
    return list_users_handler()
