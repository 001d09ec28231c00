from __future__ import annotations

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import InfrastructureError, ValidationError
from src.application.interfaces.repositories.animals import AnimalRepository
from src.domain.models.animal import Animal
from src.domain.models.breed import Breed
from src.domain.validation import FieldError
from src.infrastructure.db.orm.animal import AnimalORM
from src.infrastructure.db.orm.breed import BreedORM

UNKNOWN_BREED = FieldError("breed_id", "Selected breed does not exist")


class AnimalsSQLAlchemyRepository(AnimalRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM, breed_orm: BreedORM | None = None) -> Animal:
        breed = None
        if breed_orm is not None:
            breed = Breed(
                id=breed_orm.id,
                name=breed_orm.name,
                description=breed_orm.description,
                version=breed_orm.version,
            )
        return Animal(
            id=orm.id,
            name=orm.name,
            description=orm.description,
            breed_id=orm.breed_id,
            breed=breed,
            version=orm.version,
        )

    async def add(self, animal: Animal) -> Animal:
        orm = AnimalORM(
            name=animal.name,
            description=animal.description,
            breed_id=animal.breed_id,
            version=animal.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            # Breed removed between the existence check and the insert
            raise ValidationError("Invalid animal", errors=[UNKNOWN_BREED]) from exc
        except SQLAlchemyError as exc:
            raise InfrastructureError("Failed to save animal") from exc
        return self._to_domain(orm)

    async def get(self, animal_id: int, *, include_breed: bool = False) -> Animal | None:
        if include_breed:
            stmt = (
                select(AnimalORM, BreedORM)
                .join(BreedORM, BreedORM.id == AnimalORM.breed_id)
                .where(AnimalORM.id == animal_id)
            )
            row = (await self.session.execute(stmt)).first()
            return self._to_domain(row[0], row[1]) if row else None
        stmt = select(AnimalORM).where(AnimalORM.id == animal_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def exists(self, animal_id: int) -> bool:
        stmt = select(AnimalORM.id).where(AnimalORM.id == animal_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list(
        self,
        *,
        search: str | None = None,
        include_breed: bool = False,
    ) -> list[Animal]:
        stmt = select(AnimalORM, BreedORM).join(BreedORM, BreedORM.id == AnimalORM.breed_id)
        if search:
            # Wildcards in the term are matched literally
            stmt = stmt.where(
                or_(
                    AnimalORM.name.icontains(search, autoescape=True),
                    BreedORM.name.icontains(search, autoescape=True),
                )
            )
        stmt = stmt.order_by(AnimalORM.name, AnimalORM.id)
        result = await self.session.execute(stmt)
        return [
            self._to_domain(animal, breed if include_breed else None)
            for animal, breed in result.all()
        ]

    async def list_for_breed(self, breed_id: int) -> list[Animal]:
        stmt = (
            select(AnimalORM)
            .where(AnimalORM.breed_id == breed_id)
            .order_by(AnimalORM.name, AnimalORM.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(item) for item in result.scalars().all()]

    async def update(self, animal_id: int, data: dict, expected_version: int) -> Animal | None:
        values = {**data, "version": expected_version + 1}
        stmt = (
            update(AnimalORM)
            .where(AnimalORM.id == animal_id)
            .where(AnimalORM.version == expected_version)
            .values(**values)
            .returning(AnimalORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ValidationError("Invalid animal", errors=[UNKNOWN_BREED]) from exc
        except SQLAlchemyError as exc:
            raise InfrastructureError("Failed to update animal") from exc
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)

    async def delete(self, animal_id: int) -> bool:
        stmt = delete(AnimalORM).where(AnimalORM.id == animal_id).returning(AnimalORM.id)
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise InfrastructureError("Failed to delete animal") from exc
        return result.scalar_one_or_none() is not None

    async def count_by_breed_id(self, breed_id: int) -> int:
        stmt = select(func.count(AnimalORM.id)).where(AnimalORM.breed_id == breed_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0
