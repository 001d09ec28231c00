from __future__ import annotations

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, animal_id: int) -> None:
    deleted = await uow.animals.delete(animal_id)
    if not deleted:
        raise NotFound("Animal not found")
    await uow.commit()
