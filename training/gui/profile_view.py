from __future__ import annotations
import tkinter as tk
from tkinter import ttk, messagebox

from signature.gui.signature_pad import SignaturePad
from ..logic.training_service import TrainingService


class ProfileView(ttk.Frame):
    """Instructor profile: name, role and the signature printed on certificates."""

    def __init__(self, parent: tk.Misc, *, service: TrainingService, **kwargs) -> None:
        super().__init__(parent, **kwargs)
        self._service = service
        ins = service.get_instructor()

        self._name = tk.StringVar(value=ins.name if ins else "")
        self._role = tk.StringVar(value=ins.role if ins else "")
        self._signature = ins.signature if ins else ""

        ttk.Label(self, text="Perfil del Instructor", font=("", 16, "bold")).grid(
            row=0, column=0, columnspan=2, sticky="w", padx=12, pady=(12, 8))
        ttk.Label(self, text="Nombre").grid(row=1, column=0, sticky="w", padx=12)
        ttk.Entry(self, textvariable=self._name, width=40).grid(row=1, column=1, sticky="ew", padx=12, pady=2)
        ttk.Label(self, text="Cargo").grid(row=2, column=0, sticky="w", padx=12)
        ttk.Entry(self, textvariable=self._role, width=40).grid(row=2, column=1, sticky="ew", padx=12, pady=2)

        ttk.Label(self, text="Firma").grid(row=3, column=0, sticky="nw", padx=12, pady=(8, 0))
        self.pad = SignaturePad(self, on_artifact_ready=self._on_signature,
                                initial_artifact=self._signature)
        self.pad.grid(row=3, column=1, sticky="w", padx=12, pady=(8, 0))

        ttk.Button(self, text="Guardar", command=self._save).grid(
            row=4, column=1, sticky="e", padx=12, pady=12)

    def _on_signature(self, artifact: str) -> None:
        self._signature = artifact

    def _save(self) -> None:
        self._service.save_instructor(self._name.get(), self._role.get(), self._signature)
        messagebox.showinfo("Perfil", "Perfil guardado", parent=self)
