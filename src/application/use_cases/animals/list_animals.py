from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal


async def execute(uow: UnitOfWork) -> list[Animal]:
    """All animals with their breed, ordered by name then id."""
    return await uow.animals.list(include_breed=True)
