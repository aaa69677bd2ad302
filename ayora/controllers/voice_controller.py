import os

from flask import request, current_app, send_file

from ayora.services.upload_service import UploadError, is_audio, save_upload, stored_path, remove_upload, upload_dir
from ayora.services.voice_service import transcribe, analyze_transcript
from ayora.utils.http import ok, error

AUDIO_PREFIX = "voice"
AUDIO_SUBDIR = "audio"
AUDIO_URL_BASE = "/api/voice"


def upload_voice_handler():
    """
    Store a voice note, transcribe it and extract meal information.

    Form Fields:
        - audio: The audio file (audio/* or a known audio extension)
        - text: Optional transcript used instead of the mock transcription
    """
    audio = request.files.get("audio")
    if not audio or not audio.filename:
        return error("AUDIO_REQUIRED", "No audio file provided", 400)
    if not is_audio(audio):
        return error("INVALID_FILE_TYPE", "Only audio files are allowed", 400)

    try:
        stored = save_upload(
            audio, AUDIO_PREFIX, current_app.config["MAX_AUDIO_BYTES"], AUDIO_URL_BASE, subdir=AUDIO_SUBDIR,
        )
    except UploadError as e:
        return error("FILE_TOO_LARGE", str(e), 413)
    except OSError as e:
        current_app.logger.error(f"Voice upload failed: {e}")
        return error("UNKNOWN_ERROR", "Failed to store audio", 500)

    path = os.path.join(upload_dir(AUDIO_SUBDIR), stored["filename"])
    transcription = transcribe(path, request.form.get("text"))
    current_app.logger.info(f"Voice note {stored['filename']} uploaded by user {request.user_id}")

    return ok({
        "message": "Voice note processed successfully",
        **stored,
        "transcription": transcription,
        "analysis": analyze_transcript(transcription),
    }, 201)


def get_voice_handler(filename: str):
    path = stored_path(filename, AUDIO_SUBDIR)
    if not path:
        return error("NOT_FOUND", "Audio file not found", 404)
    return send_file(path)


def delete_voice_handler(filename: str):
    if not remove_upload(filename, AUDIO_SUBDIR):
        return error("NOT_FOUND", "Audio file not found", 404)
    return ok({"message": "Audio file deleted successfully"})
