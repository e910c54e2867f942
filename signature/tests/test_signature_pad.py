"""
signature/tests/test_signature_pad.py

Event wiring of the Tk host, driven without a display: the pad is built
without its widgets and fed stub events carrying root coordinates.
"""

from __future__ import annotations

import unittest
from types import SimpleNamespace

from signature.logic.artifact_codec import decode_artifact
from signature.logic.signature_surface import SignatureSurface
from signature.models.pointer_input import CanvasBounds, PointerPhase
from signature.models.surface_style import SurfaceStyle

try:
    from signature.gui.signature_pad import SignaturePad
except ImportError:  # Python built without Tk
    SignaturePad = None

STYLE = SurfaceStyle(width=400, height=200, stroke_width=2, stroke_color="#0f172a")


class _Photo:
    def __init__(self) -> None:
        self.pastes = 0

    def paste(self, image) -> None:
        self.pastes += 1


@unittest.skipIf(SignaturePad is None, "tkinter is not available")
class TestSignaturePadWiring(unittest.TestCase):
    def setUp(self) -> None:
        self.artifacts: list[str] = []
        self.bounds = CanvasBounds(left=100, top=50, width=400, height=200)
        pad = object.__new__(SignaturePad)
        pad._on_artifact_ready = self.artifacts.append
        pad._on_cleared = None
        pad._photo = _Photo()
        pad._surface = SignatureSurface(pad._emit, on_cleared=pad._cleared, style=STYLE,
                                        bounds_provider=lambda: self.bounds)
        self.pad = pad
        self.phases = dict(SignaturePad.POINTER_BINDINGS)

    def tearDown(self) -> None:
        if self.pad._surface is not None:
            self.pad._surface.close()

    def _fire(self, sequence: str, x_root: int, y_root: int) -> None:
        self.pad._on_mouse(SimpleNamespace(x_root=x_root, y_root=y_root), self.phases[sequence])

    def test_bindings_cover_press_motion_release_and_leave(self) -> None:
        self.assertEqual(self.phases, {
            "<ButtonPress-1>": PointerPhase.PRESS_START,
            "<B1-Motion>": PointerPhase.MOVE,
            "<ButtonRelease-1>": PointerPhase.RELEASE,
            "<Leave>": PointerPhase.RELEASE,
        })

    def test_leave_while_pressed_ends_the_stroke(self) -> None:
        self._fire("<ButtonPress-1>", 110, 60)
        self._fire("<B1-Motion>", 300, 60)
        self._fire("<B1-Motion>", 600, 60)
        self._fire("<Leave>", 600, 60)

        self.assertEqual(len(self.artifacts), 1)
        self.assertFalse(self.pad._surface.drawing)
        img = decode_artifact(self.artifacts[0])
        # root (300, 60) minus canvas origin (100, 50)
        self.assertEqual(img.getpixel((200, 10))[3], 255)
        self.assertEqual(self.pad._photo.pastes, 2)

        # re-entering with the button still held does not resume the stroke
        self._fire("<B1-Motion>", 200, 150)
        self._fire("<ButtonRelease-1>", 200, 150)
        self.assertEqual(len(self.artifacts), 1)
        self.assertEqual(decode_artifact(self.pad._surface.current_artifact()).getpixel((100, 100))[3], 0)

    def test_leave_without_press_emits_nothing(self) -> None:
        self._fire("<Leave>", 90, 40)
        self.assertEqual(self.artifacts, [])


if __name__ == "__main__":
    unittest.main()
