from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import ConflictError, NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breed import Breed
from src.domain.validation import validate_breed_fields


@dataclass(slots=True)
class UpdateBreedInput:
    breed_id: int | None
    name: str | None
    description: str | None
    # Row version the form was rendered from; None means "current"
    version: int | None = None


async def execute(uow: UnitOfWork, route_id: int, payload: UpdateBreedInput) -> Breed:
    if payload.breed_id != route_id:
        raise NotFound("Breed not found")
    existing = await uow.breeds.get(route_id)
    if not existing:
        raise NotFound("Breed not found")
    errors = validate_breed_fields(payload.name, payload.description)
    if errors:
        raise ValidationError("Invalid breed", errors=errors)

    expected_version = payload.version if payload.version is not None else existing.version
    data = {"name": payload.name, "description": payload.description}
    updated = await uow.breeds.update(route_id, data, expected_version=expected_version)
    if not updated:
        if not await uow.breeds.exists(route_id):
            raise NotFound("Breed not found")
        raise ConflictError("Version mismatch while updating breed")
    await uow.commit()
    return updated
