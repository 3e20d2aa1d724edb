"""
Storage Service Module

Stores uploaded files (menu PDFs, gallery images) on the local filesystem
under UPLOAD_FOLDER and builds the public URLs they are served from.
"""

import logging
import os
import uuid
from typing import Iterable, Tuple

from flask import current_app, url_for
from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)

PDF_EXTENSIONS = {"pdf"}
IMAGE_EXTENSIONS = {"png", "jpg", "jpeg", "gif", "webp"}


def file_extension(filename: str) -> str:
    if not filename or "." not in filename:
        return ""
    return filename.rsplit(".", 1)[1].lower()


def validate_upload(file: FileStorage, allowed: Iterable[str]) -> None:
    """
    Raises:
        ValueError: If the upload is empty or its extension is not allowed
    """
    if file is None or not file.filename:
        raise ValueError("No file uploaded")
    ext = file_extension(file.filename)
    if ext not in allowed:
        raise ValueError(f"Unsupported file type '.{ext}'. Allowed: {', '.join(sorted(allowed))}")


def _folder(category: str) -> str:
    path = os.path.join(current_app.config["UPLOAD_FOLDER"], category)
    os.makedirs(path, exist_ok=True)
    return path


def save_upload(file: FileStorage, category: str) -> Tuple[str, int]:
    """
    Save an uploaded file under UPLOAD_FOLDER/<category>.

    Returns:
        (stored filename, size in bytes)
    """
    safe = secure_filename(file.filename or "") or "upload"
    stored = f"{uuid.uuid4().hex}_{safe}"
    path = os.path.join(_folder(category), stored)
    file.save(path)
    size = os.path.getsize(path)
    logger.info("Stored upload %s/%s (%d bytes)", category, stored, size)
    return stored, size


def file_path(category: str, stored: str) -> str:
    return os.path.join(current_app.config["UPLOAD_FOLDER"], category, stored)


def delete_upload(category: str, stored: str) -> None:
    path = file_path(category, stored)
    try:
        os.remove(path)
        logger.info("Deleted upload %s/%s", category, stored)
    except FileNotFoundError:
        logger.warning("Upload %s/%s already missing on disk", category, stored)


def public_url(category: str, stored: str) -> str:
    return url_for("site.uploaded_file", filename=f"{category}/{stored}", _external=True)
