# signature/logic/input_adapters.py
"""
Mouse and touch adapters. Each turns one raw event into a canvas-local
PointerSample, or None when the event carries nothing usable.

Local coordinates are client coordinates minus the canvas' current bounding
rectangle, which the caller must read at the time of the event.
"""
from __future__ import annotations
from typing import Optional

from ..models.pointer_input import (
    CanvasBounds, MouseInput, PointerPhase, PointerSample, TouchInput,
)


def _local(client_x: float, client_y: float, bounds: CanvasBounds) -> tuple[float, float]:
    return (client_x - bounds.left, client_y - bounds.top)


def from_mouse_event(event: MouseInput, phase: PointerPhase,
                     bounds: Optional[CanvasBounds]) -> Optional[PointerSample]:
    if phase is PointerPhase.RELEASE:
        return PointerSample(phase)
    if bounds is None:
        return None
    return PointerSample(phase, _local(event.client_x, event.client_y, bounds))


def from_touch_event(event: TouchInput, phase: PointerPhase,
                     bounds: Optional[CanvasBounds]) -> Optional[PointerSample]:
    if phase is PointerPhase.RELEASE:
        return PointerSample(phase)
    touches = getattr(event, "touches", None) or ()
    if not touches or bounds is None:
        return None
    first = touches[0]
    return PointerSample(phase, _local(first.client_x, first.client_y, bounds))
