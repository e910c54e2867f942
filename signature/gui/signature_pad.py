# signature/gui/signature_pad.py
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from PIL import ImageTk

from ..logic.signature_surface import SignatureSurface
from ..models.pointer_input import CanvasBounds, MouseInput, PointerPhase
from ..models.surface_style import SurfaceStyle


class SignaturePad(ttk.Frame):
    """
    Tk host for a SignatureSurface.

    The Tk canvas only displays the surface raster; all drawing happens in the
    surface. Leaving the canvas with the button held ends the stroke like a
    release. The commit callback receives every artifact the surface emits.
    """

    POINTER_BINDINGS = (
        ("<ButtonPress-1>", PointerPhase.PRESS_START),
        ("<B1-Motion>", PointerPhase.MOVE),
        ("<ButtonRelease-1>", PointerPhase.RELEASE),
        ("<Leave>", PointerPhase.RELEASE),
    )

    def __init__(self, parent: tk.Misc, *,
                 on_artifact_ready: Callable[[str], None],
                 on_cleared: Optional[Callable[[], None]] = None,
                 style: Optional[SurfaceStyle] = None,
                 initial_artifact: str = "",
                 **kwargs) -> None:
        super().__init__(parent, **kwargs)
        self._on_artifact_ready = on_artifact_ready
        self._on_cleared = on_cleared
        style = style or SurfaceStyle.from_config()

        border = tk.Frame(self, bg="#888", padx=1, pady=1)
        border.grid(row=0, column=0, sticky="w")
        # no highlight/border on the canvas itself: its root position is the raster origin
        self.canvas = tk.Canvas(border, width=style.width, height=style.height, bg="white",
                                highlightthickness=0, borderwidth=0, cursor="pencil")
        self.canvas.pack()

        ttk.Button(self, text="Limpiar Firma", command=self.clear).grid(
            row=1, column=0, sticky="e", pady=(4, 0)
        )

        self._surface: Optional[SignatureSurface] = SignatureSurface(
            self._emit, on_cleared=self._cleared, style=style, bounds_provider=self._canvas_bounds
        )
        self._photo = ImageTk.PhotoImage(self._surface.snapshot(), master=self.canvas)
        self.canvas.create_image(0, 0, anchor="nw", image=self._photo)

        for sequence, phase in self.POINTER_BINDINGS:
            self.canvas.bind(sequence, lambda e, p=phase: self._on_mouse(e, p))
        self.bind("<Destroy>", self._on_destroy)

        if initial_artifact:
            self.load_artifact(initial_artifact)

    # Surface plumbing
    def _canvas_bounds(self) -> Optional[CanvasBounds]:
        if not self.canvas.winfo_exists():
            return None
        return CanvasBounds(
            left=self.canvas.winfo_rootx(), top=self.canvas.winfo_rooty(),
            width=self.canvas.winfo_width(), height=self.canvas.winfo_height(),
        )

    def _on_mouse(self, e: tk.Event, phase: PointerPhase) -> None:
        if self._surface is None:
            return
        self._surface.handle_mouse(MouseInput(client_x=e.x_root, client_y=e.y_root), phase)
        if phase is PointerPhase.MOVE:
            self._refresh()

    def _refresh(self) -> None:
        if self._surface is None:
            return
        snap = self._surface.snapshot()
        if snap is not None:
            self._photo.paste(snap)

    def _emit(self, artifact: str) -> None:
        self._on_artifact_ready(artifact)

    def _cleared(self) -> None:
        if self._on_cleared is not None:
            self._on_cleared()

    def _on_destroy(self, e: tk.Event) -> None:
        if e.widget is self and self._surface is not None:
            self._surface.close()
            self._surface = None

    # Public API
    def clear(self) -> None:
        if self._surface is None:
            return
        self._surface.clear()
        self._refresh()

    def load_artifact(self, artifact: str) -> bool:
        """Preview an existing signature without emitting it."""
        if self._surface is None:
            return False
        ok = self._surface.load_artifact(artifact)
        self._refresh()
        return ok
