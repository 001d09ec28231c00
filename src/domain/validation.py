"""Field rules shared by the breed and animal workflows.

Validators collect every failing rule instead of stopping at the first one,
so a form can be re-rendered with all of its messages at once.
"""

from __future__ import annotations

from dataclasses import dataclass

NAME_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 2000


@dataclass(frozen=True, slots=True)
class FieldError:
    field: str
    message: str


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _check_text(
    errors: list[FieldError],
    field: str,
    label: str,
    value: str | None,
    max_length: int,
) -> None:
    if is_blank(value):
        errors.append(FieldError(field, f"{label} is required"))
    elif len(value) > max_length:
        errors.append(FieldError(field, f"{label} cannot exceed {max_length} characters"))


def validate_breed_fields(name: str | None, description: str | None) -> list[FieldError]:
    errors: list[FieldError] = []
    _check_text(errors, "name", "Name", name, NAME_MAX_LENGTH)
    _check_text(errors, "description", "Description", description, DESCRIPTION_MAX_LENGTH)
    return errors


def validate_animal_fields(
    name: str | None, description: str | None, breed_id: int | None
) -> list[FieldError]:
    errors: list[FieldError] = []
    _check_text(errors, "name", "Name", name, NAME_MAX_LENGTH)
    _check_text(errors, "description", "Description", description, DESCRIPTION_MAX_LENGTH)
    if not is_valid_id(breed_id):
        errors.append(FieldError("breed_id", "Breed is required"))
    return errors


def is_valid_id(value: int | None) -> bool:
    # bool is an int subclass
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
