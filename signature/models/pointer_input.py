# signature/models/pointer_input.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

Point = Tuple[float, float]


class PointerPhase(str, Enum):
    """Semantic phase of a pointer event, shared by mouse and touch input."""
    PRESS_START = "press_start"
    MOVE = "move"
    RELEASE = "release"


@dataclass(frozen=True)
class PointerSample:
    """
    One normalized pointer event in canvas-local coordinates.
    ``point`` is None for releases, which never need a coordinate.
    """
    phase: PointerPhase
    point: Optional[Point] = None


@dataclass(frozen=True)
class CanvasBounds:
    """On-screen bounding rectangle of the drawing canvas (same space as client coords)."""
    left: float
    top: float
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class MouseInput:
    client_x: float
    client_y: float


@dataclass(frozen=True)
class TouchPoint:
    client_x: float
    client_y: float


@dataclass(frozen=True)
class TouchInput:
    """Touch event; ``touches`` may be empty (e.g. a stray touchend)."""
    touches: Tuple[TouchPoint, ...] = ()
