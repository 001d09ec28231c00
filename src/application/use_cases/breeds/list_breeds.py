from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breed import Breed


async def execute(uow: UnitOfWork, *, order_by_name: bool = False) -> list[Breed]:
    return await uow.breeds.list(order_by_name=order_by_name)
