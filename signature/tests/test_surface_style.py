from __future__ import annotations

import unittest
from types import SimpleNamespace

from signature.logic.artifact_codec import decode_artifact
from signature.logic.signature_surface import SignatureSurface
from signature.models.pointer_input import PointerPhase, PointerSample
from signature.models.surface_style import DEFAULT_STROKE_COLOR, TRANSPARENT, SurfaceStyle


class TestSurfaceStyle(unittest.TestCase):
    def test_from_config_values(self) -> None:
        cfg = SimpleNamespace(canvas_width="320", canvas_height=160, stroke_width=3, stroke_color="#ff0000")
        style = SurfaceStyle.from_config(cfg)
        self.assertEqual(style.size, (320, 160))
        self.assertEqual(style.stroke_width, 3)
        self.assertEqual(style.stroke_rgba, (255, 0, 0, 255))
        self.assertEqual(style.background, TRANSPARENT)

    def test_degenerate_config_is_clamped(self) -> None:
        cfg = SimpleNamespace(canvas_width=0, canvas_height=-5, stroke_width=0, stroke_color="#000")
        style = SurfaceStyle.from_config(cfg)
        self.assertEqual(style.size, (1, 1))
        self.assertEqual(style.stroke_width, 1)
        self.assertEqual(style.stroke_rgba, (0, 0, 0, 255))

    def test_unknown_colour_falls_back_to_default_pen(self) -> None:
        style = SurfaceStyle(stroke_color="nocolor")
        self.assertEqual(style.stroke_color, DEFAULT_STROKE_COLOR)
        self.assertEqual(style.stroke_rgba, (15, 23, 42, 255))

        cfg = SimpleNamespace(canvas_width=40, canvas_height=20, stroke_width=2, stroke_color="")
        self.assertEqual(SurfaceStyle.from_config(cfg).stroke_color, DEFAULT_STROKE_COLOR)

    def test_surface_with_unknown_colour_still_draws(self) -> None:
        artifacts: list[str] = []
        surface = SignatureSurface(artifacts.append, style=SurfaceStyle(width=40, height=20, stroke_color="nocolor"))
        surface.handle(PointerSample(PointerPhase.PRESS_START, (2, 10)))
        surface.handle(PointerSample(PointerPhase.MOVE, (30, 10)))
        surface.handle(PointerSample(PointerPhase.RELEASE))
        surface.close()
        self.assertEqual(len(artifacts), 1)
        self.assertEqual(decode_artifact(artifacts[0]).getpixel((15, 10)), (15, 23, 42, 255))


if __name__ == "__main__":
    unittest.main()
