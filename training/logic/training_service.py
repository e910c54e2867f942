# training/logic/training_service.py
from __future__ import annotations
import uuid
from typing import Any, Iterable, List, Optional, Tuple

from core.helpers.date_time_helper import now_epoch_ms
from signature.logic.artifact_codec import is_empty_artifact

from ..exceptions.errors import NotFoundError, ValidationError
from ..models import mappers
from ..models.training_models import (
    Assignment, Attendance, Company, Instructor, Training, TrainingItem,
)
from .training_store import (
    KEY_ASSIGNMENTS, KEY_ATTENDANCES, KEY_COMPANIES, KEY_INSTRUCTOR, KEY_TRAININGS, TrainingStore,
)

_FEATURE_ID = "Training"


def _new_id() -> str:
    return str(uuid.uuid4())


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


class TrainingService:
    """
    Instructor profile, companies, trainings, assignments and attendance records.

    Every mutation is written through to the store and logged. Input problems
    raise ValidationError, unknown ids raise NotFoundError.
    """

    def __init__(self, *, store: TrainingStore, logger: Optional[Any] = None) -> None:
        self._store = store
        if logger is None:
            from core.logging.logic.logger import logger as default_logger
            logger = default_logger
        self._logger = logger

    def _log(self, event: str, *, reference_id: Optional[str] = None,
             message: Optional[str] = None, level: str = "INFO") -> None:
        self._logger.log(_FEATURE_ID, event, level=level, reference_id=reference_id, message=message)

    # -------- Instructor -----------------------------------------------------
    def get_instructor(self) -> Optional[Instructor]:
        return mappers.instructor_from_dict(self._store.get(KEY_INSTRUCTOR))

    def save_instructor(self, name: str, role: str, signature: str) -> Instructor:
        ins = Instructor(name=_clean(name), role=_clean(role), signature=signature or "")
        self._store.set(KEY_INSTRUCTOR, mappers.instructor_to_dict(ins))
        self._log("InstructorSaved", message=f"signature={'no' if is_empty_artifact(ins.signature) else 'yes'}")
        return ins

    # -------- Companies ------------------------------------------------------
    def list_companies(self) -> List[Company]:
        return [mappers.company_from_dict(d) for d in self._store.get_list(KEY_COMPANIES)]

    def get_company(self, company_id: str) -> Company:
        for c in self.list_companies():
            if c.id == company_id:
                return c
        raise NotFoundError(f"Unknown company '{company_id}'.")

    def add_company(self, name: str, cuit: str) -> Company:
        name, cuit = _clean(name), _clean(cuit)
        if not name or not cuit:
            raise ValidationError("Company name and CUIT are required.")
        company = Company(id=_new_id(), name=name, cuit=cuit)
        data = self._store.get_list(KEY_COMPANIES)
        data.append(mappers.company_to_dict(company))
        self._store.set(KEY_COMPANIES, data)
        self._log("CompanyAdded", reference_id=company.id, message=name)
        return company

    def remove_company(self, company_id: str) -> bool:
        return self._remove(KEY_COMPANIES, company_id, "CompanyRemoved")

    # -------- Trainings ------------------------------------------------------
    def list_trainings(self) -> List[Training]:
        return [mappers.training_from_dict(d) for d in self._store.get_list(KEY_TRAININGS)]

    def get_training(self, training_id: str) -> Training:
        for t in self.list_trainings():
            if t.id == training_id:
                return t
        raise NotFoundError(f"Unknown training '{training_id}'.")

    def add_training(self, title: str, items: Iterable[Tuple[str, str]]) -> Training:
        """Create a training from (title, url) link pairs; at least one link is required."""
        title = _clean(title)
        links: List[TrainingItem] = []
        for item_title, url in items:
            item_title, url = _clean(item_title), _clean(url)
            if not item_title or not url:
                raise ValidationError("Every link needs a title and a URL.")
            links.append(TrainingItem(id=_new_id(), title=item_title, url=url))
        if not title or not links:
            raise ValidationError("A training needs a title and at least one link.")
        training = Training(id=_new_id(), title=title, items=links)
        data = self._store.get_list(KEY_TRAININGS)
        data.append(mappers.training_to_dict(training))
        self._store.set(KEY_TRAININGS, data)
        self._log("TrainingAdded", reference_id=training.id, message=f"{title} ({len(links)} links)")
        return training

    def remove_training(self, training_id: str) -> bool:
        return self._remove(KEY_TRAININGS, training_id, "TrainingRemoved")

    # -------- Assignments ----------------------------------------------------
    def list_assignments(self) -> List[Assignment]:
        return [mappers.assignment_from_dict(d) for d in self._store.get_list(KEY_ASSIGNMENTS)]

    def assignments_for_training(self, training_id: str) -> List[Assignment]:
        return [a for a in self.list_assignments() if a.training_id == training_id]

    def assign(self, training_id: str, company_id: str) -> Assignment:
        """Link a training to a company. Returns the existing assignment for a known pair."""
        self.get_training(training_id)
        self.get_company(company_id)
        for a in self.list_assignments():
            if a.training_id == training_id and a.company_id == company_id:
                return a
        assignment = Assignment(id=_new_id(), training_id=training_id, company_id=company_id)
        data = self._store.get_list(KEY_ASSIGNMENTS)
        data.append(mappers.assignment_to_dict(assignment))
        self._store.set(KEY_ASSIGNMENTS, data)
        self._log("AssignmentAdded", reference_id=assignment.id,
                  message=f"training={training_id} company={company_id}")
        return assignment

    def remove_assignment(self, assignment_id: str) -> bool:
        return self._remove(KEY_ASSIGNMENTS, assignment_id, "AssignmentRemoved")

    # -------- Employee access ------------------------------------------------
    def resolve_access(self, training_id: str, company_id: str) -> Tuple[Training, Company]:
        """Look up the pair behind an access link."""
        try:
            return self.get_training(training_id), self.get_company(company_id)
        except NotFoundError:
            self._log("AccessNotFound", level="WARNING",
                      message=f"training={training_id} company={company_id}")
            raise

    # -------- Attendance -----------------------------------------------------
    def list_attendances(self) -> List[Attendance]:
        return [mappers.attendance_from_dict(d) for d in self._store.get_list(KEY_ATTENDANCES)]

    def filter_attendances(self, *, company_id: Optional[str] = None,
                           training_id: Optional[str] = None) -> List[Attendance]:
        """Empty/None filters match everything."""
        return [
            a for a in self.list_attendances()
            if (not company_id or a.company_id == company_id)
            and (not training_id or a.training_id == training_id)
        ]

    def submit_attendance(self, *, training_id: str, company_id: str, employee_name: str,
                          employee_dni: str, employee_signature: str) -> Attendance:
        name, dni = _clean(employee_name), _clean(employee_dni)
        if not name or not dni or is_empty_artifact(employee_signature):
            raise ValidationError("Name, DNI and signature are required.")
        training, company = self.resolve_access(training_id, company_id)
        attendance = Attendance(
            id=_new_id(),
            employee_name=name,
            employee_dni=dni,
            employee_signature=employee_signature,
            training_id=training.id,
            company_id=company.id,
            timestamp=now_epoch_ms(),
        )
        data = self._store.get_list(KEY_ATTENDANCES)
        data.append(mappers.attendance_to_dict(attendance))
        self._store.set(KEY_ATTENDANCES, data)
        self._log("AttendanceSubmitted", reference_id=attendance.id,
                  message=f"training={training.id} company={company.id}")
        return attendance

    def remove_attendance(self, attendance_id: str) -> bool:
        return self._remove(KEY_ATTENDANCES, attendance_id, "AttendanceRemoved")

    # -------- Internal -------------------------------------------------------
    def _remove(self, key: str, record_id: str, event: str) -> bool:
        data = self._store.get_list(key)
        kept = [d for d in data if d.get("id") != record_id]
        if len(kept) == len(data):
            return False
        self._store.set(key, kept)
        self._log(event, reference_id=record_id)
        return True
