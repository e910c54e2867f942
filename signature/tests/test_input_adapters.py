"""Mouse/touch normalization into canvas-local pointer samples."""
from __future__ import annotations

import unittest

from signature.logic.input_adapters import from_mouse_event, from_touch_event
from signature.models.pointer_input import (
    CanvasBounds, MouseInput, PointerPhase, PointerSample, TouchInput, TouchPoint,
)

OFFSET = CanvasBounds(left=40, top=25, width=400, height=200)


class TestInputAdapters(unittest.TestCase):
    def test_mouse_press_is_offset_by_bounds(self) -> None:
        sample = from_mouse_event(MouseInput(45, 30), PointerPhase.PRESS_START, OFFSET)
        self.assertEqual(sample, PointerSample(PointerPhase.PRESS_START, (5, 5)))

    def test_touch_uses_first_touch_point(self) -> None:
        event = TouchInput((TouchPoint(45, 30), TouchPoint(300, 300)))
        sample = from_touch_event(event, PointerPhase.MOVE, OFFSET)
        self.assertEqual(sample, PointerSample(PointerPhase.MOVE, (5, 5)))

    def test_touch_without_points_yields_nothing(self) -> None:
        self.assertIsNone(from_touch_event(TouchInput(()), PointerPhase.PRESS_START, OFFSET))
        self.assertIsNone(from_touch_event(TouchInput(()), PointerPhase.MOVE, OFFSET))

    def test_duck_typed_touch_event_without_touches(self) -> None:
        class _Stray:
            pass
        self.assertIsNone(from_touch_event(_Stray(), PointerPhase.MOVE, OFFSET))

    def test_release_needs_no_coordinates(self) -> None:
        self.assertEqual(from_touch_event(TouchInput(()), PointerPhase.RELEASE, None),
                         PointerSample(PointerPhase.RELEASE))
        self.assertEqual(from_mouse_event(MouseInput(0, 0), PointerPhase.RELEASE, None),
                         PointerSample(PointerPhase.RELEASE))

    def test_missing_bounds_yields_nothing(self) -> None:
        self.assertIsNone(from_mouse_event(MouseInput(10, 10), PointerPhase.PRESS_START, None))
        self.assertIsNone(from_touch_event(TouchInput((TouchPoint(1, 1),)), PointerPhase.MOVE, None))


if __name__ == "__main__":
    unittest.main()
