"""
framework/gui/main_window.py
============================

Root window: navigation bar on top, one view in the display area, status
bar at the bottom. Instructor views (profile, companies, trainings,
registry) and the employee view opened from an access link share one
TrainingService.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import Frame, Label, Button, X, LEFT, simpledialog, messagebox
from typing import Callable, Optional

from core.config.config_service import config_service
from core.logging.logic.logger import logger
from training.exceptions.errors import TrainingError
from training.gui.attendance_view import AttendanceView
from training.gui.companies_view import CompaniesView
from training.gui.profile_view import ProfileView
from training.gui.registry_view import RegistryView
from training.gui.trainings_view import TrainingsView
from training.logic.access_links import parse_access_link
from training.logic.training_service import TrainingService
from training.logic.training_session import TrainingSession
from training.logic.training_store import TrainingStore


class MainWindow(tk.Tk):
    """Main application window."""

    def __init__(self, *, service: Optional[TrainingService] = None) -> None:
        super().__init__()
        self.service = service or TrainingService(store=TrainingStore())
        self.active_view: Optional[tk.Widget] = None

        self.title(config_service.general.app_name or "TrainerPro")
        self.geometry("1000x720")

        # ---------- Frames ---------------------------------------------
        self.nav_frame = Frame(self, height=40, bg="#dddddd")
        self.nav_frame.pack(side="top", fill=X)

        self.display_area = Frame(self, bg="white")
        self.display_area.pack(fill="both", expand=True)

        self.status_bar = Label(self, text="", anchor="w", bg="#eeeeee")
        self.status_bar.pack(side="bottom", fill=X)

        nav = (
            ("Perfil", lambda: ProfileView(self.display_area, service=self.service)),
            ("Empresas", lambda: CompaniesView(self.display_area, service=self.service)),
            ("Capacitaciones", lambda: TrainingsView(self.display_area, service=self.service)),
            ("Registro", lambda: RegistryView(self.display_area, service=self.service)),
        )
        for text, factory in nav:
            Button(self.nav_frame, text=text, command=lambda t=text, f=factory: self.show(t, f)).pack(
                side=LEFT, padx=5, pady=5)
        Button(self.nav_frame, text="Abrir link de acceso…", command=self.open_access_link).pack(
            side="right", padx=10, pady=5)

        self.show("Perfil", nav[0][1])

    # ------------------------------------------------------------------ #
    def clear_display_area(self) -> None:
        for widget in self.display_area.winfo_children():
            widget.destroy()
        self.active_view = None

    def show(self, name: str, factory: Callable[[], tk.Widget]) -> None:
        self.clear_display_area()
        self.active_view = factory()
        self.active_view.pack(fill="both", expand=True)
        self.set_status(name)

    def open_access_link(self) -> None:
        link = simpledialog.askstring("Acceso", "Link de la capacitación:", parent=self)
        if not link:
            return
        try:
            training_id, company_id = parse_access_link(link)
            training, company = self.service.resolve_access(training_id, company_id)
        except TrainingError:
            messagebox.showerror("Acceso", "Capacitación no encontrada. El link puede estar roto "
                                           "o la capacitación fue eliminada.", parent=self)
            return
        session = TrainingSession(training, company)
        self.show(training.title, lambda: AttendanceView(self.display_area, service=self.service, session=session))

    def set_status(self, message: str) -> None:
        self.status_bar.config(text=message)


def run() -> None:
    logger.log("App", "Start", message=config_service.general.version)
    app = MainWindow()
    app.mainloop()
