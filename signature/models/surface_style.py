# signature/models/surface_style.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from PIL import ImageColor

RGBA = Tuple[int, int, int, int]

TRANSPARENT: RGBA = (0, 0, 0, 0)
DEFAULT_STROKE_COLOR = "#0f172a"


@dataclass(frozen=True)
class SurfaceStyle:
    """
    Fixed raster geometry and pen of a capture surface. Constant for the
    lifetime of a surface; resizing is not supported.

    The background is fully transparent so the artifact can be laid over any
    document; the dark stroke stays visible on white paper and light widgets.
    """
    width: int = 400
    height: int = 200
    stroke_width: int = 2
    stroke_color: str = DEFAULT_STROKE_COLOR
    background: RGBA = TRANSPARENT

    def __post_init__(self) -> None:
        # unparseable colours fall back to the default pen
        try:
            ImageColor.getrgb(self.stroke_color)
        except (ValueError, TypeError, AttributeError):
            object.__setattr__(self, "stroke_color", DEFAULT_STROKE_COLOR)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def stroke_rgba(self) -> RGBA:
        r, g, b = ImageColor.getrgb(self.stroke_color)[:3]
        return (r, g, b, 255)

    @classmethod
    def from_config(cls, cfg: Optional[object] = None) -> "SurfaceStyle":
        """Build the style from a ``SignatureConfig`` (defaults to the loaded config)."""
        if cfg is None:
            from core.config.config_service import config_service
            cfg = config_service.signature
        return cls(
            width=max(1, int(cfg.canvas_width)),
            height=max(1, int(cfg.canvas_height)),
            stroke_width=max(1, int(cfg.stroke_width)),
            stroke_color=str(cfg.stroke_color),
        )
