import os

from flask import request, current_app, send_file

from ayora.services.image_analysis_service import analyze_food_image
from ayora.services.upload_service import UploadError, is_image, save_upload, stored_path, remove_upload
from ayora.utils.http import ok, error

IMAGE_PREFIX = "food"
IMAGE_URL_BASE = "/api/images"


def upload_image_handler():
    """
    Store a meal photo and return a mock food analysis for it.

    Form Fields:
        - image: The image file (image/* only)
        - food_name: Optional name used instead of the canned recognition
    """
    image = request.files.get("image")
    if not image or not image.filename:
        return error("IMAGE_REQUIRED", "No image file provided", 400)
    if not is_image(image):
        return error("INVALID_FILE_TYPE", "Only image files are allowed", 400)

    try:
        stored = save_upload(image, IMAGE_PREFIX, current_app.config["MAX_IMAGE_BYTES"], IMAGE_URL_BASE)
    except UploadError as e:
        return error("FILE_TOO_LARGE", str(e), 413)
    except OSError as e:
        current_app.logger.error(f"Image upload failed: {e}")
        return error("UNKNOWN_ERROR", "Failed to store image", 500)

    path = os.path.join(current_app.config["UPLOAD_FOLDER"], stored["filename"])
    analysis = analyze_food_image(path, request.form.get("food_name"))
    current_app.logger.info(f"Image {stored['filename']} uploaded by user {request.user_id}")

    return ok({
        "message": "Image uploaded and analyzed successfully",
        **stored,
        "analysis": analysis,
    }, 201)


def get_image_handler(filename: str):
    path = stored_path(filename)
    if not path:
        return error("NOT_FOUND", "Image not found", 404)
    return send_file(path)


def delete_image_handler(filename: str):
    if not remove_upload(filename):
        return error("NOT_FOUND", "Image not found", 404)
    return ok({"message": "Image deleted successfully"})
