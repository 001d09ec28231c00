from __future__ import annotations

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, InfrastructureError, ReferentialIntegrityError
from src.domain.models.breed import Breed
from src.domain.ports.breeds_repo import BreedsRepo
from src.infrastructure.db.orm.breed import BreedORM


class BreedsSQLAlchemyRepository(BreedsRepo):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedORM) -> Breed:
        return Breed(
            id=orm.id,
            name=orm.name,
            description=orm.description,
            version=orm.version,
        )

    async def add(self, breed: Breed) -> Breed:
        orm = BreedORM(
            name=breed.name,
            description=breed.description,
            version=breed.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Failed to create breed") from exc
        return self._to_domain(orm)

    async def get(self, breed_id: int) -> Breed | None:
        stmt = select(BreedORM).where(BreedORM.id == breed_id)
        res = await self.session.execute(stmt)
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def exists(self, breed_id: int) -> bool:
        stmt = select(BreedORM.id).where(BreedORM.id == breed_id)
        res = await self.session.execute(stmt)
        return res.scalar_one_or_none() is not None

    async def find_by_name(self, name: str) -> Breed | None:
        stmt = (
            select(BreedORM)
            .where(func.lower(BreedORM.name) == name.lower())
            .order_by(BreedORM.id)
        )
        res = await self.session.execute(stmt)
        orm = res.scalars().first()
        return self._to_domain(orm) if orm else None

    async def list(self, *, order_by_name: bool = False) -> list[Breed]:
        stmt = select(BreedORM)
        if order_by_name:
            stmt = stmt.order_by(BreedORM.name, BreedORM.id)
        else:
            stmt = stmt.order_by(BreedORM.id)
        res = await self.session.execute(stmt)
        return [self._to_domain(x) for x in res.scalars().all()]

    async def update(self, breed_id: int, data: dict, expected_version: int) -> Breed | None:
        values = {**data, "version": expected_version + 1}
        stmt = (
            update(BreedORM)
            .where(BreedORM.id == breed_id)
            .where(BreedORM.version == expected_version)
            .values(**values)
            .returning(BreedORM)
        )
        try:
            res = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise InfrastructureError("Failed to update breed") from exc
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def delete(self, breed_id: int) -> bool:
        stmt = delete(BreedORM).where(BreedORM.id == breed_id).returning(BreedORM.id)
        try:
            res = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ReferentialIntegrityError(
                "Breed is referenced by animals", details={"breed_id": breed_id}
            ) from exc
        return res.scalar_one_or_none() is not None
