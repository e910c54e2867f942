# signature/logic/signature_surface.py
from __future__ import annotations
from typing import Callable, Optional

from PIL import Image, ImageDraw

from ..models.pointer_input import (
    CanvasBounds, MouseInput, Point, PointerPhase, PointerSample, TouchInput,
)
from ..models.surface_style import SurfaceStyle
from .artifact_codec import EMPTY_ARTIFACT, decode_artifact, encode_image
from .input_adapters import from_mouse_event, from_touch_event

ArtifactCallback = Callable[[str], None]
BoundsProvider = Callable[[], Optional[CanvasBounds]]


class SignatureSurface:
    """
    Freehand signature capture on a fixed-size RGBA raster (no UI).

    States: idle and drawing. A press starts a new, unconnected path; moves
    draw round-capped segments from the last point; a release (also when the
    pointer left the canvas while pressed) serializes the whole raster and
    hands it to ``on_artifact_ready`` exactly once.

    A tap without movement emits the real, visually blank raster. It is not
    treated as a clear.

    Missing bounds, missing touch points and a closed surface are silent
    no-ops; nothing here reports errors to the caller.
    """

    def __init__(self, on_artifact_ready: ArtifactCallback, *,
                 on_cleared: Optional[Callable[[], None]] = None,
                 style: Optional[SurfaceStyle] = None,
                 bounds_provider: Optional[BoundsProvider] = None) -> None:
        self._on_artifact_ready = on_artifact_ready
        self._on_cleared = on_cleared
        self._style = style or SurfaceStyle.from_config()
        self._bounds_provider = bounds_provider

        self._image: Optional[Image.Image] = Image.new("RGBA", self._style.size, self._style.background)
        self._draw: Optional[ImageDraw.ImageDraw] = ImageDraw.Draw(self._image)
        self._drawing = False
        self._last_point: Optional[Point] = None

    # -------- State ----------------------------------------------------------
    @property
    def style(self) -> SurfaceStyle:
        return self._style

    @property
    def drawing(self) -> bool:
        return self._drawing

    @property
    def last_point(self) -> Optional[Point]:
        return self._last_point

    @property
    def closed(self) -> bool:
        return self._image is None

    # -------- Input ----------------------------------------------------------
    def _bounds(self) -> Optional[CanvasBounds]:
        if self._bounds_provider is None:
            return None
        return self._bounds_provider()

    def handle_mouse(self, event: MouseInput, phase: PointerPhase) -> None:
        self.handle(from_mouse_event(event, phase, self._bounds()))

    def handle_touch(self, event: TouchInput, phase: PointerPhase) -> None:
        self.handle(from_touch_event(event, phase, self._bounds()))

    def handle(self, sample: Optional[PointerSample]) -> None:
        """Feed one canvas-local sample into the state machine."""
        if sample is None or self._image is None:
            return
        if sample.phase is PointerPhase.PRESS_START:
            self._press(sample.point)
        elif sample.phase is PointerPhase.MOVE:
            self._move(sample.point)
        elif sample.phase is PointerPhase.RELEASE:
            self._release()

    def _press(self, point: Optional[Point]) -> None:
        if point is None:
            return
        self._drawing = True
        # new path origin; never connected to the previous stroke
        self._last_point = point

    def _move(self, point: Optional[Point]) -> None:
        if not self._drawing or point is None:
            return
        if self._last_point is not None:
            self._segment(self._last_point, point)
        self._last_point = point

    def _release(self) -> None:
        if not self._drawing:
            return
        self._drawing = False
        self._last_point = None
        self._on_artifact_ready(self.current_artifact())

    def _segment(self, start: Point, end: Point) -> None:
        if self._draw is None:
            return
        fill = self._style.stroke_rgba
        w = self._style.stroke_width
        self._draw.line([start, end], fill=fill, width=w)
        # round caps
        r = w / 2.0
        for x, y in (start, end):
            self._draw.ellipse([x - r, y - r, x + r, y + r], fill=fill)

    # -------- Commands -------------------------------------------------------
    def clear(self) -> None:
        """Reset the raster to the background and emit the empty sentinel."""
        if self._image is None:
            return
        self._image.paste(self._style.background, (0, 0, *self._style.size))
        self._on_artifact_ready(EMPTY_ARTIFACT)
        if self._on_cleared is not None:
            self._on_cleared()

    def load_artifact(self, artifact: str) -> bool:
        """
        Show an existing artifact as preview. Does not emit.
        Returns False when the value cannot be decoded (the raster is left untouched).
        """
        if self._image is None:
            return False
        if not artifact:
            self._image.paste(self._style.background, (0, 0, *self._style.size))
            return True
        try:
            img = decode_artifact(artifact)
        except ValueError:
            return False
        if img.size != self._style.size:
            img.thumbnail(self._style.size)
        self._image.paste(self._style.background, (0, 0, *self._style.size))
        self._image.paste(img, (0, 0))
        return True

    def current_artifact(self) -> str:
        """Serialize the raster exactly as it is now."""
        if self._image is None:
            return EMPTY_ARTIFACT
        return encode_image(self._image)

    def snapshot(self) -> Optional[Image.Image]:
        """Copy of the raster for display; callers never get the live buffer."""
        return self._image.copy() if self._image is not None else None

    def close(self) -> None:
        """Release the raster. Later calls become no-ops."""
        self._draw = None
        if self._image is not None:
            self._image.close()
        self._image = None
        self._drawing = False
        self._last_point = None
