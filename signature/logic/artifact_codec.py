# signature/logic/artifact_codec.py
"""
Serialization of signature rasters.

An artifact is a PNG data URL (``data:image/png;base64,...``) of the full RGBA
canvas. The empty string is the sentinel for "no signature". PNG keeps the
transparent background and embeds directly into reportlab documents.
"""
from __future__ import annotations
import base64
import binascii
import io
from typing import Optional

from PIL import Image, UnidentifiedImageError

EMPTY_ARTIFACT = ""
PNG_DATA_URL_PREFIX = "data:image/png;base64,"


def is_empty_artifact(artifact: Optional[str]) -> bool:
    return not artifact


def encode_image(img: Image.Image) -> str:
    """Encode a Pillow image as PNG data URL."""
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return PNG_DATA_URL_PREFIX + base64.b64encode(buf.getvalue()).decode("ascii")


def artifact_to_png_bytes(artifact: str) -> bytes:
    """
    Return the raw PNG bytes of a non-empty artifact.
    Raises ValueError for the empty sentinel or a malformed value.
    """
    if is_empty_artifact(artifact):
        raise ValueError("Empty signature artifact.")
    if not artifact.startswith(PNG_DATA_URL_PREFIX):
        raise ValueError("Signature artifact is not a PNG data URL.")
    try:
        return base64.b64decode(artifact[len(PNG_DATA_URL_PREFIX):], validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("Signature artifact payload is not valid base64.") from exc


def decode_artifact(artifact: str) -> Image.Image:
    """Decode a non-empty artifact into an RGBA Pillow image."""
    png = artifact_to_png_bytes(artifact)
    try:
        img = Image.open(io.BytesIO(png))
        img.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise ValueError("Signature artifact payload is not a PNG image.") from exc
    return img.convert("RGBA")
