from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breed import Breed
from src.domain.validation import validate_breed_fields


@dataclass(slots=True)
class CreateBreedInput:
    name: str | None
    description: str | None


async def execute(uow: UnitOfWork, payload: CreateBreedInput) -> Breed:
    errors = validate_breed_fields(payload.name, payload.description)
    if errors:
        raise ValidationError("Invalid breed", errors=errors)
    breed = Breed.create(name=payload.name, description=payload.description)
    created = await uow.breeds.add(breed)
    await uow.commit()
    return created
