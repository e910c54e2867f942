from __future__ import annotations
import tkinter as tk
from tkinter import ttk, filedialog, messagebox

from core.helpers.date_time_helper import epoch_ms_to_local_date_str
from ..logic.pdf_documents import merge_pdfs, render_attendance_register, render_certificate
from ..logic.training_service import TrainingService
from .pdf_export import save_pdf

_ALL = "(todas)"


class RegistryView(ttk.Frame):
    """Attendance register with company/training filters and PDF exports."""

    def __init__(self, parent: tk.Misc, *, service: TrainingService, **kwargs) -> None:
        super().__init__(parent, **kwargs)
        self._service = service
        self.columnconfigure(0, weight=1)
        self.rowconfigure(2, weight=1)

        ttk.Label(self, text="Registro de Asistencia", font=("", 16, "bold")).grid(
            row=0, column=0, sticky="w", padx=12, pady=(12, 8))

        bar = ttk.Frame(self)
        bar.grid(row=1, column=0, sticky="ew", padx=12)
        self._company_box = ttk.Combobox(bar, state="readonly", width=26)
        self._training_box = ttk.Combobox(bar, state="readonly", width=26)
        self._company_box.pack(side="left")
        self._training_box.pack(side="left", padx=6)
        self._company_box.bind("<<ComboboxSelected>>", lambda e: self.refresh_rows())
        self._training_box.bind("<<ComboboxSelected>>", lambda e: self.refresh_rows())
        ttk.Button(bar, text="PDF", command=self._export_register).pack(side="right")
        ttk.Button(bar, text="Constancias…", command=self._export_certificates).pack(side="right", padx=6)
        ttk.Button(bar, text="Eliminar", command=self._remove).pack(side="right")

        self.tree = ttk.Treeview(self, columns=("name", "dni", "company", "date"), show="headings", height=14)
        for col, text in (("name", "Empleado"), ("dni", "DNI"), ("company", "Empresa"), ("date", "Fecha")):
            self.tree.heading(col, text=text)
        self.tree.grid(row=2, column=0, sticky="nsew", padx=12, pady=8)
        self.refresh()

    def refresh(self) -> None:
        self._companies = self._service.list_companies()
        self._trainings = self._service.list_trainings()
        self._company_box["values"] = [_ALL] + [c.name for c in self._companies]
        self._training_box["values"] = [_ALL] + [t.title for t in self._trainings]
        if self._company_box.current() < 0:
            self._company_box.current(0)
        if self._training_box.current() < 0:
            self._training_box.current(0)
        self.refresh_rows()

    def _filtered(self):
        ci, ti = self._company_box.current(), self._training_box.current()
        company_id = self._companies[ci - 1].id if ci > 0 else None
        training_id = self._trainings[ti - 1].id if ti > 0 else None
        return self._service.filter_attendances(company_id=company_id, training_id=training_id)

    def refresh_rows(self) -> None:
        names = {c.id: c.name for c in self._companies}
        self.tree.delete(*self.tree.get_children())
        for a in self._filtered():
            self.tree.insert("", "end", iid=a.id, values=(
                a.employee_name, a.employee_dni, names.get(a.company_id, "-"),
                epoch_ms_to_local_date_str(a.timestamp),
            ))

    def _ask_path(self, initial: str) -> str:
        return filedialog.asksaveasfilename(parent=self, defaultextension=".pdf",
                                            initialfile=initial, filetypes=[("PDF", "*.pdf")])

    def _export_register(self) -> None:
        path = self._ask_path("asistencias.pdf")
        if path:
            save_pdf(self, path, render_attendance_register(self._filtered(), self._companies), title="Registro")

    def _export_certificates(self) -> None:
        rows = self._filtered()
        if not rows:
            messagebox.showinfo("Constancias", "No hay asistencias para exportar.", parent=self)
            return
        path = self._ask_path("constancias.pdf")
        if not path:
            return
        trainings = {t.id: t for t in self._trainings}
        companies = {c.id: c for c in self._companies}
        instructor = self._service.get_instructor()
        docs = [
            render_certificate(a, trainings[a.training_id], companies[a.company_id], instructor)
            for a in rows
            if a.training_id in trainings and a.company_id in companies
        ]
        save_pdf(self, path, merge_pdfs(docs), title="Constancias")

    def _remove(self) -> None:
        for iid in self.tree.selection():
            self._service.remove_attendance(iid)
        self.refresh_rows()
