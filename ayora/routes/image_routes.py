from flask import Blueprint
from ayora.utils.auth import require_auth
from ayora.controllers.image_controller import (
    upload_image_handler,
    get_image_handler,
    delete_image_handler,
)

image_bp = Blueprint("image", __name__, url_prefix="/api/images")

@image_bp.post("/upload")
@require_auth
def upload_image():
    return upload_image_handler()


@image_bp.get("/<filename>")
@require_auth
def get_image(filename):
    return get_image_handler(filename)


@image_bp.delete("/<filename>")
@require_auth
def delete_image(filename):
    return delete_image_handler(filename)
