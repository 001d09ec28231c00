from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.validation import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH
from src.infrastructure.db.base import Base


class AnimalORM(Base):
    __tablename__ = "Animals"

    id: Mapped[int] = mapped_column("AnimalId", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("Name", String(NAME_MAX_LENGTH), nullable=False)
    description: Mapped[str] = mapped_column(
        "Description", String(DESCRIPTION_MAX_LENGTH), nullable=False
    )
    # No relationship(): the breed is joined explicitly by the repository
    breed_id: Mapped[int] = mapped_column(
        "BreedId",
        Integer,
        ForeignKey("Breeds.BreedId", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    version: Mapped[int] = mapped_column("Version", Integer, nullable=False, default=1)
