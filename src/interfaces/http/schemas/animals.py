from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.application.use_cases.animals.create_animal import CreateAnimalInput
from src.application.use_cases.animals.register_animal import RegisterAnimalResult
from src.application.use_cases.animals.update_animal import UpdateAnimalInput
from src.domain.models.animal import Animal
from src.interfaces.http.schemas.common import coerce_id, coerce_text


class AnimalForm(BaseModel):
    """Create/Edit/Register form, bound by the PascalCase field names the pages post."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    animal_id: int | None = Field(None, alias="AnimalId")
    name: str | None = Field(None, alias="Name")
    description: str | None = Field(None, alias="Description")
    breed_id: int | None = Field(None, alias="BreedId")
    version: int | None = Field(None, alias="Version")
    return_url: str | None = Field(None, alias="returnUrl")

    @field_validator("animal_id", "breed_id", "version", mode="before")
    @classmethod
    def parse_ids(cls, v):
        return coerce_id(v)

    @field_validator("name", "description", "return_url", mode="before")
    @classmethod
    def parse_text(cls, v):
        return coerce_text(v)

    @classmethod
    def from_animal(cls, animal: Animal) -> AnimalForm:
        return cls(
            animal_id=animal.id,
            name=animal.name,
            description=animal.description,
            breed_id=animal.breed_id,
            version=animal.version,
        )

    def to_create_input(self) -> CreateAnimalInput:
        return CreateAnimalInput(
            name=self.name, description=self.description, breed_id=self.breed_id
        )

    def to_update_input(self) -> UpdateAnimalInput:
        return UpdateAnimalInput(
            animal_id=self.animal_id,
            name=self.name,
            description=self.description,
            breed_id=self.breed_id,
            version=self.version,
        )


class RegisterAnimalResponse(BaseModel):
    success: bool
    message: str | None = None
    errors: list[str] | None = None
    animal_id: int | None = None

    @classmethod
    def from_result(cls, result: RegisterAnimalResult) -> RegisterAnimalResponse:
        return cls(
            success=result.success,
            message=result.message,
            errors=result.errors or None,
            animal_id=result.animal.id if result.animal else None,
        )
