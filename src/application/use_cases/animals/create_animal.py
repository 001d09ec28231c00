from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal
from src.domain.validation import FieldError, is_valid_id, validate_animal_fields
from src.utils.urls import safe_redirect_target

LIST_URL = "/Animal"
UNKNOWN_BREED_MESSAGE = "Selected breed does not exist"


@dataclass(slots=True)
class CreateAnimalInput:
    name: str | None
    description: str | None
    breed_id: int | None


@dataclass(slots=True)
class CreateAnimalResult:
    animal: Animal
    redirect_url: str


async def collect_errors(
    uow: UnitOfWork, name: str | None, description: str | None, breed_id: int | None
) -> list[FieldError]:
    """Field rules plus the breed lookup; the lookup only runs for a usable id."""
    errors = validate_animal_fields(name, description, breed_id)
    if is_valid_id(breed_id) and not await uow.breeds.exists(breed_id):
        errors.append(FieldError("breed_id", UNKNOWN_BREED_MESSAGE))
    return errors


async def execute(
    uow: UnitOfWork,
    payload: CreateAnimalInput,
    *,
    return_url: str | None = None,
) -> CreateAnimalResult:
    errors = await collect_errors(uow, payload.name, payload.description, payload.breed_id)
    if errors:
        raise ValidationError("Invalid animal", errors=errors)
    animal = Animal.create(
        name=payload.name,
        description=payload.description,
        breed_id=payload.breed_id,
    )
    created = await uow.animals.add(animal)
    await uow.commit()
    return CreateAnimalResult(
        animal=created,
        redirect_url=safe_redirect_target(return_url, LIST_URL),
    )
