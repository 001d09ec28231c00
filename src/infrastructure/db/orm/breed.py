from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.validation import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH
from src.infrastructure.db.base import Base


class BreedORM(Base):
    __tablename__ = "Breeds"

    id: Mapped[int] = mapped_column("BreedId", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("BreedName", String(NAME_MAX_LENGTH), nullable=False)
    description: Mapped[str] = mapped_column(
        "Description", String(DESCRIPTION_MAX_LENGTH), nullable=False
    )
    version: Mapped[int] = mapped_column("Version", Integer, nullable=False, default=1)
