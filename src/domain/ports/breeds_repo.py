from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.breed import Breed


class BreedsRepo(ABC):
    @abstractmethod
    async def add(self, breed: Breed) -> Breed: ...

    @abstractmethod
    async def get(self, breed_id: int) -> Breed | None: ...

    @abstractmethod
    async def exists(self, breed_id: int) -> bool: ...

    @abstractmethod
    async def find_by_name(self, name: str) -> Breed | None: ...

    @abstractmethod
    async def list(self, *, order_by_name: bool = False) -> list[Breed]: ...

    @abstractmethod
    async def update(self, breed_id: int, data: dict, expected_version: int) -> Breed | None: ...

    @abstractmethod
    async def delete(self, breed_id: int) -> bool: ...
