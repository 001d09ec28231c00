#!/usr/bin/env python3
"""
Script to seed the catalog with a default set of breeds.

Each breed goes through the regular create-breed workflow, so the same
validation applies as for the web form. Breeds whose name already exists
(case-insensitive) are skipped, which makes the script safe to re-run.

Usage:
  python scripts/seed_breeds.py [--create-schema]
"""

import asyncio
import sys
from collections.abc import Callable
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.errors import ValidationError
from src.application.use_cases.breeds import create_breed
from src.config.settings import get_settings
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import animal, breed  # noqa: F401
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)

DEFAULT_BREEDS: list[tuple[str, str]] = [
    ("Holstein", "Black and white dairy cattle, the highest milk producers."),
    ("Jersey", "Small dairy breed known for rich, high-butterfat milk."),
    ("Brown Swiss", "Hardy dairy breed with a calm temperament."),
    ("Angus", "Polled beef breed, usually solid black or red."),
    ("Charolais", "Large white beef breed from France."),
    ("Labrador Retriever", "Friendly, outgoing retriever dog."),
    ("German Shepherd", "Intelligent and versatile working dog."),
    ("Maine Coon", "Large, sociable long-haired cat."),
    ("Siamese", "Slender, vocal short-haired cat with colorpoint markings."),
]


async def seed_default_breeds(
    session_factory: Callable,
    breeds: list[tuple[str, str]] = DEFAULT_BREEDS,
) -> list[str]:
    """Create the missing breeds and return the names that were inserted."""
    created: list[str] = []
    for name, description in breeds:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            if await uow.breeds.find_by_name(name):
                continue
            try:
                await create_breed.execute(
                    uow, create_breed.CreateBreedInput(name=name, description=description)
                )
            except ValidationError as exc:
                print(f"⚠️  Skipping {name!r}: {', '.join(exc.messages())}")
                continue
            created.append(name)
    return created


async def main(create_schema: bool) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    try:
        if create_schema:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        created = await seed_default_breeds(session_factory)
        if created:
            print(f"✅ Created {len(created)} breed(s): {', '.join(created)}")
        else:
            print("ℹ️  All default breeds already exist")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Seed the default breeds")
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create missing tables before seeding",
    )
    args = parser.parse_args()

    asyncio.run(main(args.create_schema))
