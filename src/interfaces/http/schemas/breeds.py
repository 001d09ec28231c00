from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.application.use_cases.breeds.create_breed import CreateBreedInput
from src.application.use_cases.breeds.update_breed import UpdateBreedInput
from src.domain.models.breed import Breed
from src.interfaces.http.schemas.common import coerce_id, coerce_text


class BreedForm(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    breed_id: int | None = Field(None, alias="BreedId")
    name: str | None = Field(None, alias="BreedName")
    description: str | None = Field(None, alias="Description")
    version: int | None = Field(None, alias="Version")

    @field_validator("breed_id", "version", mode="before")
    @classmethod
    def parse_ids(cls, v):
        return coerce_id(v)

    @field_validator("name", "description", mode="before")
    @classmethod
    def parse_text(cls, v):
        return coerce_text(v)

    @classmethod
    def from_breed(cls, breed: Breed) -> BreedForm:
        return cls(
            breed_id=breed.id,
            name=breed.name,
            description=breed.description,
            version=breed.version,
        )

    def to_create_input(self) -> CreateBreedInput:
        return CreateBreedInput(name=self.name, description=self.description)

    def to_update_input(self) -> UpdateBreedInput:
        return UpdateBreedInput(
            breed_id=self.breed_id,
            name=self.name,
            description=self.description,
            version=self.version,
        )
