"""
Domain models for the training feature.

Signatures are stored as artifact strings produced by the capture surface
(PNG data URL, "" when missing); the models never decode them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Instructor:
    name: str = ""
    role: str = ""
    signature: str = ""


@dataclass(frozen=True)
class Company:
    id: str
    name: str
    cuit: str


@dataclass(frozen=True)
class TrainingItem:
    """One external document link of a training module."""
    id: str
    title: str
    url: str


@dataclass
class Training:
    id: str
    title: str
    items: List[TrainingItem] = field(default_factory=list)


@dataclass(frozen=True)
class Assignment:
    """Links a training to a company; one access link/QR per assignment."""
    id: str
    training_id: str
    company_id: str


@dataclass(frozen=True)
class Attendance:
    id: str
    employee_name: str
    employee_dni: str
    employee_signature: str
    training_id: str
    company_id: str
    timestamp: int  # epoch milliseconds (UTC)
