from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import ConflictError, NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.animals.create_animal import collect_errors
from src.domain.models.animal import Animal

EDITABLE_FIELDS = ("name", "description", "breed_id")


@dataclass(slots=True)
class UpdateAnimalInput:
    animal_id: int | None
    name: str | None
    description: str | None
    breed_id: int | None
    version: int | None = None


async def execute(uow: UnitOfWork, route_id: int, payload: UpdateAnimalInput) -> Animal:
    if payload.animal_id != route_id:
        raise NotFound("Animal not found")
    existing = await uow.animals.get(route_id)
    if not existing:
        raise NotFound("Animal not found")
    errors = await collect_errors(uow, payload.name, payload.description, payload.breed_id)
    if errors:
        raise ValidationError("Invalid animal", errors=errors)

    data: dict = {}
    for field_name in EDITABLE_FIELDS:
        data[field_name] = getattr(payload, field_name)
    expected_version = payload.version if payload.version is not None else existing.version
    updated = await uow.animals.update(route_id, data=data, expected_version=expected_version)
    if not updated:
        if not await uow.animals.exists(route_id):
            raise NotFound("Animal not found")
        raise ConflictError("Version mismatch while updating animal")
    await uow.commit()
    return updated
