from __future__ import annotations

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal


async def execute(uow: UnitOfWork, animal_id: int) -> Animal:
    animal = await uow.animals.get(animal_id, include_breed=True)
    if not animal:
        raise NotFound("Animal not found")
    return animal
