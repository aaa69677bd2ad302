"""
Upload Service

Stores uploaded image and audio files under ``UPLOAD_FOLDER``.
"""

import os
import random
import time
from typing import Any, Dict, Optional

from flask import current_app
from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

AUDIO_EXTENSIONS = {".wav", ".mp3", ".ogg", ".flac", ".m4a"}


class UploadError(ValueError):
    """Raised when an uploaded file is rejected."""


def upload_dir(subdir: Optional[str] = None) -> str:
    base = current_app.config["UPLOAD_FOLDER"]
    path = os.path.join(base, subdir) if subdir else base
    os.makedirs(path, exist_ok=True)
    return path


def file_size(file: FileStorage) -> int:
    stream = file.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def is_image(file: FileStorage) -> bool:
    return (file.mimetype or "").startswith("image/")


def is_audio(file: FileStorage) -> bool:
    ext = os.path.splitext(file.filename or "")[1].lower()
    return (file.mimetype or "").startswith("audio/") or ext in AUDIO_EXTENSIONS


def unique_name(prefix: str, original: str) -> str:
    ext = os.path.splitext(secure_filename(original or ""))[1].lower()
    return f"{prefix}-{int(time.time() * 1000)}-{random.randint(0, 10**9)}{ext}"


def save_upload(
    file: FileStorage,
    prefix: str,
    max_bytes: int,
    url_base: str,
    subdir: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Persist an uploaded file and describe it.

    The returned ``url`` is ``{url_base}/{filename}``, the API route that
    serves the stored file.

    Raises:
        UploadError: If the file exceeds ``max_bytes``
    """
    size = file_size(file)
    if size > max_bytes:
        raise UploadError(f"File exceeds the {max_bytes // (1024 * 1024)}MB limit")

    filename = unique_name(prefix, file.filename or "")
    file.save(os.path.join(upload_dir(subdir), filename))

    return {
        "filename": filename,
        "original_name": file.filename,
        "url": f"{url_base.rstrip('/')}/{filename}",
        "content_type": file.mimetype,
        "size": size,
    }


def stored_path(filename: str, subdir: Optional[str] = None) -> Optional[str]:
    """Return the absolute path of a stored upload, or None if absent or unsafe."""
    safe = secure_filename(filename or "")
    if not safe or safe != filename:
        return None
    path = os.path.join(upload_dir(subdir), safe)
    return path if os.path.isfile(path) else None


def remove_upload(filename: str, subdir: Optional[str] = None) -> bool:
    path = stored_path(filename, subdir)
    if not path:
        return False
    os.remove(path)
    return True
