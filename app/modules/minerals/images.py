"""Image upload helpers."""

import base64
from pathlib import PurePath
from typing import Optional

from modules.minerals.errors import ValidationError

SUPPORTED_EXTENSIONS = ("png", "jpg", "webp", "gif")

_EXTENSION_ALIASES = {"jpeg": "jpg"}

_CONTENT_TYPE_EXTENSIONS = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/webp": "webp",
    "image/gif": "gif",
}

_EXTENSION_CONTENT_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "webp": "image/webp",
    "gif": "image/gif",
}


def normalize_extension(ext: str) -> Optional[str]:
    ext = (ext or "").strip().lower().lstrip(".")
    ext = _EXTENSION_ALIASES.get(ext, ext)
    return ext if ext in SUPPORTED_EXTENSIONS else None


def detect_image_extension(
    filename: Optional[str], content_type: Optional[str]
) -> str:
    """Work out the stored extension for an upload.

    The filename suffix wins; the declared content type is the fallback.

    Raises:
        ValidationError: If neither identifies a supported image format.
    """
    if filename:
        ext = normalize_extension(PurePath(filename).suffix)
        if ext:
            return ext
    if content_type:
        ext = _CONTENT_TYPE_EXTENSIONS.get(content_type.split(";")[0].strip().lower())
        if ext:
            return ext
    raise ValidationError(
        "unsupported image format; use png, jpg, webp or gif", field="image"
    )


def content_type_for_extension(ext: str) -> str:
    return _EXTENSION_CONTENT_TYPES.get(ext, "application/octet-stream")


def image_filename(ext: str) -> str:
    return f"image.{ext}"


def to_data_url(image_bytes: bytes, ext: str) -> str:
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{content_type_for_extension(ext)};base64,{encoded}"
