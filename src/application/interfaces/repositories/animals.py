from __future__ import annotations

from typing import Protocol

from src.domain.models.animal import Animal


class AnimalRepository(Protocol):
    async def add(self, animal: Animal) -> Animal: ...

    async def get(self, animal_id: int, *, include_breed: bool = False) -> Animal | None: ...

    async def exists(self, animal_id: int) -> bool: ...

    async def list(
        self,
        *,
        search: str | None = None,
        include_breed: bool = False,
    ) -> list[Animal]: ...

    async def list_for_breed(self, breed_id: int) -> list[Animal]: ...

    async def update(self, animal_id: int, data: dict, expected_version: int) -> Animal | None: ...

    async def delete(self, animal_id: int) -> bool: ...

    async def count_by_breed_id(self, breed_id: int) -> int: ...
