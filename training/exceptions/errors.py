"""Training feature exceptions."""
from __future__ import annotations


class TrainingError(Exception):
    """Base exception for the training feature."""


class ValidationError(TrainingError):
    """Raised when user input is incomplete or invalid."""


class NotFoundError(TrainingError):
    """Raised when a referenced training, company or record does not exist."""
