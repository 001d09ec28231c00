from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.animals import list_animals
from src.domain.models.animal import Animal
from src.domain.validation import is_blank


async def execute(uow: UnitOfWork, term: str | None) -> list[Animal]:
    if is_blank(term):
        return await list_animals.execute(uow)
    # Case-insensitive substring on the animal name or the breed name
    return await uow.animals.list(search=term.strip(), include_breed=True)
