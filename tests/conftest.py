from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path
from typing import cast

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("CREATE_SCHEMA_ON_STARTUP", "false")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import animal, breed  # noqa: F401
from src.infrastructure.db.orm.animal import AnimalORM
from src.infrastructure.db.orm.breed import BreedORM
from src.interfaces.http.main import create_app


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
            "create_schema_on_startup": False,
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    # raise_app_exceptions=False so the generic 500 page can be asserted on
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
async def seeded_breeds(app, client) -> dict[str, int]:
    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        async_session = cast(AsyncSession, session)
        labrador = BreedORM(name="Labrador", description="Friendly retriever")
        siamese = BreedORM(name="Siamese", description="Vocal short-haired cat")
        async_session.add_all([labrador, siamese])
        await async_session.commit()
        return {"labrador": labrador.id, "siamese": siamese.id}


@pytest.fixture()
async def seeded_animals(app, seeded_breeds: dict[str, int]) -> dict[str, int]:
    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        async_session = cast(AsyncSession, session)
        # Inserted out of name order on purpose
        rex = AnimalORM(name="Rex", description="Good boy", breed_id=seeded_breeds["labrador"])
        luna = AnimalORM(name="Luna", description="Sleeps a lot", breed_id=seeded_breeds["siamese"])
        buddy = AnimalORM(
            name="Buddy", description="Fetches sticks", breed_id=seeded_breeds["labrador"]
        )
        async_session.add_all([rex, luna, buddy])
        await async_session.commit()
        return {"rex": rex.id, "luna": luna.id, "buddy": buddy.id}
