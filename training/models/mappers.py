from __future__ import annotations
from typing import Any, Dict, Optional

from .training_models import Assignment, Attendance, Company, Instructor, Training, TrainingItem

# Stored documents use camelCase keys, compatible with exports of the web version.


def instructor_to_dict(ins: Instructor) -> Dict[str, Any]:
    return {"name": ins.name, "role": ins.role, "signature": ins.signature}


def instructor_from_dict(data: Optional[Dict[str, Any]]) -> Optional[Instructor]:
    if not data:
        return None
    return Instructor(
        name=str(data.get("name", "")),
        role=str(data.get("role", "")),
        signature=str(data.get("signature", "") or ""),
    )


def company_to_dict(c: Company) -> Dict[str, Any]:
    return {"id": c.id, "name": c.name, "cuit": c.cuit}


def company_from_dict(data: Dict[str, Any]) -> Company:
    return Company(id=data["id"], name=data["name"], cuit=data.get("cuit", ""))


def training_to_dict(t: Training) -> Dict[str, Any]:
    return {
        "id": t.id,
        "title": t.title,
        "items": [{"id": i.id, "title": i.title, "url": i.url} for i in t.items],
    }


def training_from_dict(data: Dict[str, Any]) -> Training:
    return Training(
        id=data["id"],
        title=data["title"],
        items=[TrainingItem(id=i["id"], title=i["title"], url=i["url"]) for i in data.get("items", [])],
    )


def assignment_to_dict(a: Assignment) -> Dict[str, Any]:
    return {"id": a.id, "trainingId": a.training_id, "companyId": a.company_id}


def assignment_from_dict(data: Dict[str, Any]) -> Assignment:
    return Assignment(id=data["id"], training_id=data["trainingId"], company_id=data["companyId"])


def attendance_to_dict(a: Attendance) -> Dict[str, Any]:
    return {
        "id": a.id,
        "employeeName": a.employee_name,
        "employeeDni": a.employee_dni,
        "employeeSignature": a.employee_signature,
        "trainingId": a.training_id,
        "companyId": a.company_id,
        "timestamp": a.timestamp,
    }


def attendance_from_dict(data: Dict[str, Any]) -> Attendance:
    return Attendance(
        id=data["id"],
        employee_name=data["employeeName"],
        employee_dni=data["employeeDni"],
        employee_signature=data.get("employeeSignature", "") or "",
        training_id=data["trainingId"],
        company_id=data["companyId"],
        timestamp=int(data["timestamp"]),
    )
