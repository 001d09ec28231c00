from __future__ import annotations

from typing import Any, Mapping, Sequence

from src.domain.validation import FieldError


class AppError(Exception):
    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class NotFound(AppError):
    code = "not_found"
    status_code = 404


class ValidationError(AppError):
    code = "validation_error"
    status_code = 422

    def __init__(
        self,
        message: str,
        *,
        errors: Sequence[FieldError] = (),
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.errors = list(errors)

    def messages(self) -> list[str]:
        return [e.message for e in self.errors]

    def by_field(self) -> dict[str, list[str]]:
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped


class ConflictError(AppError):
    """Row changed between read and write (optimistic concurrency)."""

    code = "conflict"
    status_code = 409


class ReferentialIntegrityError(AppError):
    code = "referential_integrity"
    status_code = 409


class InfrastructureError(AppError):
    code = "infrastructure_error"
    status_code = 500
