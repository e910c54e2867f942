from __future__ import annotations
import tkinter as tk
from tkinter import messagebox


def save_pdf(parent: tk.Misc, path: str, data: bytes, *, title: str) -> bool:
    """Write generated PDF bytes; a failed write is reported, not raised."""
    try:
        with open(path, "wb") as fh:
            fh.write(data)
    except OSError as exc:
        messagebox.showerror(title, f"No se pudo guardar el archivo:\n{exc}", parent=parent)
        return False
    return True
