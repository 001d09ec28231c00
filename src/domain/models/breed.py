from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.models.animal import Animal


@dataclass(slots=True)
class Breed:
    id: int | None
    name: str
    description: str
    version: int = 1
    # Populated only when the caller asks for it (get_breed include_animals=True)
    animals: list[Animal] = field(default_factory=list)

    @classmethod
    def create(cls, name: str, description: str) -> Breed:
        return cls(id=None, name=name, description=description, version=1)
