from __future__ import annotations
import tkinter as tk
import webbrowser
from tkinter import ttk, filedialog, messagebox
from typing import Optional

from signature.gui.signature_pad import SignaturePad
from ..exceptions.errors import TrainingError
from ..logic.pdf_documents import certificate_filename, render_certificate
from ..logic.training_service import TrainingService
from .pdf_export import save_pdf
from ..logic.training_session import TrainingSession
from ..models.training_models import Attendance


class AttendanceView(ttk.Frame):
    """
    Employee page behind an access link: open every module link, then
    register attendance with name, DNI and a drawn signature.
    """

    def __init__(self, parent: tk.Misc, *, service: TrainingService, session: TrainingSession, **kwargs) -> None:
        super().__init__(parent, **kwargs)
        self._service = service
        self._session = session
        self._signature = ""
        self._attendance: Optional[Attendance] = None
        self.columnconfigure(0, weight=1)

        head = ttk.Frame(self)
        head.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 4))
        ttk.Label(head, text=session.training.title, font=("", 16, "bold")).pack(side="left")
        ttk.Label(head, text=f"  {session.company.name}").pack(side="left")
        self._progress = ttk.Label(head, text="")
        self._progress.pack(side="right")

        items = ttk.LabelFrame(self, text="Contenido del Módulo")
        items.grid(row=1, column=0, sticky="ew", padx=12, pady=4)
        self._item_buttons = {}
        for idx, item in enumerate(session.training.items, start=1):
            btn = ttk.Button(items, text=f"{idx}. {item.title}", command=lambda i=item.id: self._open_item(i))
            btn.pack(fill="x", padx=6, pady=2)
            self._item_buttons[item.id] = btn

        self._form = ttk.LabelFrame(self, text="Registro de Asistencia")
        self._form.grid(row=2, column=0, sticky="ew", padx=12, pady=8)
        self._name = tk.StringVar()
        self._dni = tk.StringVar()
        ttk.Label(self._form, text="Nombre y Apellido").grid(row=0, column=0, sticky="w", padx=6, pady=2)
        ttk.Entry(self._form, textvariable=self._name, width=40).grid(row=0, column=1, sticky="w", padx=6, pady=2)
        ttk.Label(self._form, text="DNI").grid(row=1, column=0, sticky="w", padx=6, pady=2)
        ttk.Entry(self._form, textvariable=self._dni, width=20).grid(row=1, column=1, sticky="w", padx=6, pady=2)
        ttk.Label(self._form, text="Tu Firma Digital").grid(row=2, column=0, sticky="nw", padx=6, pady=2)
        self.pad = SignaturePad(self._form, on_artifact_ready=self._on_signature)
        self.pad.grid(row=2, column=1, sticky="w", padx=6, pady=2)
        self._submit = ttk.Button(self._form, text="Finalizar y Registrar", command=self._submit_attendance)
        self._submit.grid(row=3, column=1, sticky="e", padx=6, pady=6)

        self._done = ttk.Frame(self)
        ttk.Label(self._done, text="Asistencia Registrada", font=("", 16, "bold")).pack(pady=(12, 4))
        ttk.Button(self._done, text="Descargar Constancia", command=self._download_certificate).pack(pady=4)

        self._update_state()

    def _on_signature(self, artifact: str) -> None:
        self._signature = artifact

    def _open_item(self, item_id: str) -> None:
        url = self._session.mark_viewed(item_id)
        webbrowser.open(url, new=2)
        self._update_state()

    def _update_state(self) -> None:
        self._progress.config(text=f"Progreso {self._session.progress}%")
        for item_id, btn in self._item_buttons.items():
            if self._session.is_viewed(item_id):
                btn.state(["pressed"])
        self._submit.state(["!disabled"] if self._session.is_complete else ["disabled"])

    def _submit_attendance(self) -> None:
        if not self._session.is_complete:
            return
        try:
            self._attendance = self._service.submit_attendance(
                training_id=self._session.training.id,
                company_id=self._session.company.id,
                employee_name=self._name.get(),
                employee_dni=self._dni.get(),
                employee_signature=self._signature,
            )
        except TrainingError:
            messagebox.showwarning("Asistencia", "Por favor complete todos los campos y firme la asistencia.",
                                   parent=self)
            return
        self._form.grid_remove()
        self._done.grid(row=2, column=0, sticky="ew", padx=12, pady=8)

    def _download_certificate(self) -> None:
        if self._attendance is None:
            return
        path = filedialog.asksaveasfilename(
            parent=self, defaultextension=".pdf",
            initialfile=certificate_filename(self._attendance, self._session.training),
            filetypes=[("PDF", "*.pdf")],
        )
        if not path:
            return
        pdf = render_certificate(self._attendance, self._session.training, self._session.company,
                                 self._service.get_instructor())
        save_pdf(self, path, pdf, title="Constancia")
