from __future__ import annotations
import tkinter as tk
from tkinter import ttk, messagebox

from ..exceptions.errors import TrainingError
from ..logic.training_service import TrainingService


class CompaniesView(ttk.Frame):
    """Company list with add/remove."""

    def __init__(self, parent: tk.Misc, *, service: TrainingService, **kwargs) -> None:
        super().__init__(parent, **kwargs)
        self._service = service
        self.columnconfigure(0, weight=1)
        self.rowconfigure(2, weight=1)

        ttk.Label(self, text="Empresas", font=("", 16, "bold")).grid(row=0, column=0, sticky="w", padx=12, pady=(12, 8))

        bar = ttk.Frame(self)
        bar.grid(row=1, column=0, sticky="ew", padx=12)
        self._name = tk.StringVar()
        self._cuit = tk.StringVar()
        ttk.Label(bar, text="Nombre").pack(side="left")
        ttk.Entry(bar, textvariable=self._name, width=30).pack(side="left", padx=(4, 12))
        ttk.Label(bar, text="CUIT").pack(side="left")
        ttk.Entry(bar, textvariable=self._cuit, width=16).pack(side="left", padx=(4, 12))
        ttk.Button(bar, text="Agregar", command=self._add).pack(side="left")

        self.tree = ttk.Treeview(self, columns=("name", "cuit"), show="headings", height=12)
        self.tree.heading("name", text="Empresa")
        self.tree.heading("cuit", text="CUIT")
        self.tree.grid(row=2, column=0, sticky="nsew", padx=12, pady=8)

        ttk.Button(self, text="Eliminar", command=self._remove).grid(row=3, column=0, sticky="e", padx=12, pady=(0, 12))
        self.refresh()

    def refresh(self) -> None:
        self.tree.delete(*self.tree.get_children())
        for c in self._service.list_companies():
            self.tree.insert("", "end", iid=c.id, values=(c.name, c.cuit))

    def _add(self) -> None:
        try:
            self._service.add_company(self._name.get(), self._cuit.get())
        except TrainingError as exc:
            messagebox.showerror("Empresas", str(exc), parent=self)
            return
        self._name.set("")
        self._cuit.set("")
        self.refresh()

    def _remove(self) -> None:
        for iid in self.tree.selection():
            self._service.remove_company(iid)
        self.refresh()
