from flask import Blueprint
from ayora.utils.auth import require_auth
from ayora.controllers.voice_controller import (
    upload_voice_handler,
    get_voice_handler,
    delete_voice_handler,
)

voice_bp = Blueprint("voice", __name__, url_prefix="/api/voice")

@voice_bp.post("/upload")
@require_auth
def upload_voice():
    return upload_voice_handler()


# Alias kept for older clients
@voice_bp.post("/process")
@require_auth
def process_voice():
    return upload_voice_handler()


@voice_bp.get("/<filename>")
@require_auth
def get_voice(filename):
    return get_voice_handler(filename)


@voice_bp.delete("/<filename>")
@require_auth
def delete_voice(filename):
    return delete_voice_handler(filename)
