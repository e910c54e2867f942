# training/logic/access_links.py
"""
Employee access links and their QR codes.

Link format: ``<base_url>#/training/<training_id>/<company_id>``.
"""
from __future__ import annotations
import re
from typing import Optional, Tuple

import qrcode
from PIL import Image

from ..exceptions.errors import ValidationError

_ROUTE_RE = re.compile(r"#/training/(?P<training>[^/?#]+)/(?P<company>[^/?#]+)/?$")


def build_access_link(training_id: str, company_id: str, base_url: Optional[str] = None) -> str:
    if base_url is None:
        from core.config.config_service import config_service
        base_url = config_service.access.base_url
    base = base_url.split("#", 1)[0]
    return f"{base}#/training/{training_id}/{company_id}"


def parse_access_link(link: str) -> Tuple[str, str]:
    """Return (training_id, company_id) of an access link."""
    m = _ROUTE_RE.search((link or "").strip())
    if not m:
        raise ValidationError(f"Not a training access link: {link!r}")
    return m.group("training"), m.group("company")


def make_qr_image(data: str, *, box_size: int = 10, border: int = 4) -> Image.Image:
    """Black-on-white QR code as RGB Pillow image."""
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(data)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")
    if hasattr(img, "get_image"):
        img = img.get_image()
    if img.mode != "RGB":
        img = img.convert("RGB")
    return img
