from __future__ import annotations

from dataclasses import dataclass

from src.domain.models.breed import Breed


@dataclass(slots=True)
class Animal:
    id: int | None
    name: str
    description: str
    breed_id: int
    breed: Breed | None = None
    version: int = 1

    @classmethod
    def create(cls, name: str, description: str, breed_id: int) -> Animal:
        return cls(id=None, name=name, description=description, breed_id=breed_id, version=1)
