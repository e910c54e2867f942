from __future__ import annotations
import tkinter as tk
from tkinter import ttk, filedialog, messagebox
from typing import List, Tuple

from ..exceptions.errors import TrainingError
from ..logic.access_links import build_access_link, make_qr_image
from ..logic.pdf_documents import flyer_filename, render_access_flyer
from ..logic.training_service import TrainingService
from .pdf_export import save_pdf


class TrainingsView(ttk.Frame):
    """
    Training modules and their company assignments.

    Tree rows: trainings at top level, one child per assigned company.
    Child ids are assignment ids.
    """

    def __init__(self, parent: tk.Misc, *, service: TrainingService, **kwargs) -> None:
        super().__init__(parent, **kwargs)
        self._service = service
        self._pending_links: List[Tuple[str, str]] = []
        self.columnconfigure(0, weight=1)
        self.rowconfigure(3, weight=1)

        ttk.Label(self, text="Capacitaciones", font=("", 16, "bold")).grid(row=0, column=0, sticky="w", padx=12, pady=(12, 8))

        # New training
        form = ttk.LabelFrame(self, text="Nueva capacitación")
        form.grid(row=1, column=0, sticky="ew", padx=12)
        form.columnconfigure(1, weight=1)
        self._title = tk.StringVar()
        self._link_title = tk.StringVar()
        self._link_url = tk.StringVar()
        ttk.Label(form, text="Título").grid(row=0, column=0, sticky="w", padx=6, pady=2)
        ttk.Entry(form, textvariable=self._title).grid(row=0, column=1, columnspan=3, sticky="ew", padx=6, pady=2)
        ttk.Label(form, text="Título link").grid(row=1, column=0, sticky="w", padx=6, pady=2)
        ttk.Entry(form, textvariable=self._link_title, width=24).grid(row=1, column=1, sticky="ew", padx=6, pady=2)
        ttk.Entry(form, textvariable=self._link_url, width=40).grid(row=1, column=2, sticky="ew", padx=6, pady=2)
        ttk.Button(form, text="Agregar link", command=self._add_link).grid(row=1, column=3, padx=6, pady=2)
        self._pending_label = ttk.Label(form, text="")
        self._pending_label.grid(row=2, column=0, columnspan=3, sticky="w", padx=6)
        ttk.Button(form, text="Crear Capacitación", command=self._create).grid(row=2, column=3, padx=6, pady=4)

        # Assignment bar
        bar = ttk.Frame(self)
        bar.grid(row=2, column=0, sticky="ew", padx=12, pady=(8, 0))
        self._company = tk.StringVar()
        self._company_box = ttk.Combobox(bar, textvariable=self._company, state="readonly", width=30)
        self._company_box.pack(side="left")
        ttk.Button(bar, text="Vincular con Empresa", command=self._assign).pack(side="left", padx=6)
        ttk.Button(bar, text="Flyer QR…", command=self._export_flyer).pack(side="left", padx=6)
        ttk.Button(bar, text="Copiar link", command=self._copy_link).pack(side="left", padx=6)
        ttk.Button(bar, text="Eliminar", command=self._remove).pack(side="right")

        self.tree = ttk.Treeview(self, columns=("info",), show="tree headings", height=14)
        self.tree.heading("#0", text="Capacitación / Empresa")
        self.tree.heading("info", text="Links")
        self.tree.grid(row=3, column=0, sticky="nsew", padx=12, pady=8)
        self.refresh()

    # ------------------------------------------------------------------ data
    def refresh(self) -> None:
        companies = self._service.list_companies()
        self._company_ids = [c.id for c in companies]
        self._company_box["values"] = [c.name for c in companies]
        names = {c.id: c.name for c in companies}

        self.tree.delete(*self.tree.get_children())
        for t in self._service.list_trainings():
            self.tree.insert("", "end", iid=t.id, text=t.title, values=(len(t.items),), open=True)
            for a in self._service.assignments_for_training(t.id):
                self.tree.insert(t.id, "end", iid=a.id, text=names.get(a.company_id, "Empresa"), values=("",))

    def _selected_training_id(self) -> str | None:
        sel = self.tree.selection()
        if not sel:
            return None
        parent = self.tree.parent(sel[0])
        return parent or sel[0]

    def _selected_assignment(self):
        sel = self.tree.selection()
        if not sel or not self.tree.parent(sel[0]):
            return None
        for a in self._service.list_assignments():
            if a.id == sel[0]:
                return a
        return None

    # --------------------------------------------------------------- actions
    def _add_link(self) -> None:
        title, url = self._link_title.get().strip(), self._link_url.get().strip()
        if not title or not url:
            return
        self._pending_links.append((title, url))
        self._link_title.set("")
        self._link_url.set("")
        self._pending_label.config(text=", ".join(t for t, _ in self._pending_links))

    def _create(self) -> None:
        try:
            self._service.add_training(self._title.get(), self._pending_links)
        except TrainingError as exc:
            messagebox.showerror("Capacitaciones", str(exc), parent=self)
            return
        self._title.set("")
        self._pending_links = []
        self._pending_label.config(text="")
        self.refresh()

    def _assign(self) -> None:
        training_id = self._selected_training_id()
        idx = self._company_box.current()
        if training_id is None or idx < 0:
            return
        try:
            self._service.assign(training_id, self._company_ids[idx])
        except TrainingError as exc:
            messagebox.showerror("Capacitaciones", str(exc), parent=self)
            return
        self.refresh()

    def _export_flyer(self) -> None:
        a = self._selected_assignment()
        if a is None:
            messagebox.showinfo("Flyer", "Seleccione una empresa vinculada.", parent=self)
            return
        try:
            training, company = self._service.resolve_access(a.training_id, a.company_id)
        except TrainingError as exc:
            messagebox.showerror("Flyer", str(exc), parent=self)
            return
        link = build_access_link(a.training_id, a.company_id)
        path = filedialog.asksaveasfilename(parent=self, defaultextension=".pdf",
                                            initialfile=flyer_filename(training, company),
                                            filetypes=[("PDF", "*.pdf")])
        if not path:
            return
        save_pdf(self, path, render_access_flyer(training, company, link, make_qr_image(link)), title="Flyer")

    def _copy_link(self) -> None:
        a = self._selected_assignment()
        if a is None:
            return
        self.clipboard_clear()
        self.clipboard_append(build_access_link(a.training_id, a.company_id))

    def _remove(self) -> None:
        for iid in self.tree.selection():
            if self.tree.parent(iid):
                self._service.remove_assignment(iid)
            else:
                self._service.remove_training(iid)
        self.refresh()
