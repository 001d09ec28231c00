from __future__ import annotations

import re

from sqlalchemy import func, select

from src.infrastructure.db.orm.animal import AnimalORM


def row_names(html: str) -> list[str]:
    return re.findall(r'<td class="animal-name">([^<]*)</td>', html)


async def count_animals(app) -> int:
    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        result = await session.execute(select(func.count(AnimalORM.id)))
        return result.scalar_one()


async def test_animals_crud_flow(app, client, seeded_breeds):
    create_response = await client.post(
        "/Animal/Create",
        data={
            "Name": "Bella",
            "Description": "Loves the beach",
            "BreedId": str(seeded_breeds["labrador"]),
        },
    )
    assert create_response.status_code == 303
    assert create_response.headers["location"] == "/Animal"

    list_response = await client.get("/Animal")
    assert list_response.status_code == 200
    assert row_names(list_response.text) == ["Bella"]
    assert "Labrador" in list_response.text

    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        row = (await session.execute(select(AnimalORM))).scalar_one()
        animal_id = row.id
        assert (row.name, row.description, row.breed_id) == (
            "Bella",
            "Loves the beach",
            seeded_breeds["labrador"],
        )

    edit_form = await client.get(f"/Animal/Edit/{animal_id}")
    assert edit_form.status_code == 200
    assert 'value="Bella"' in edit_form.text

    update_response = await client.post(
        f"/Animal/Edit/{animal_id}",
        data={
            "AnimalId": str(animal_id),
            "Name": "Bella Prime",
            "Description": "Still loves the beach",
            "BreedId": str(seeded_breeds["siamese"]),
            "Version": "1",
        },
    )
    assert update_response.status_code == 303

    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        row = (await session.execute(select(AnimalORM))).scalar_one()
        assert row.name == "Bella Prime"
        assert row.breed_id == seeded_breeds["siamese"]
        assert row.version == 2

    confirm = await client.get(f"/Animal/Delete/{animal_id}")
    assert confirm.status_code == 200
    assert "Siamese" in confirm.text

    delete_response = await client.post(f"/Animal/Delete/{animal_id}")
    assert delete_response.status_code == 303
    assert await count_animals(app) == 0

    missing = await client.get(f"/Animal/Edit/{animal_id}")
    assert missing.status_code == 404


async def test_create_redirects_to_local_return_url_only(client, seeded_breeds):
    data = {
        "Name": "Scout",
        "Description": "Curious",
        "BreedId": str(seeded_breeds["labrador"]),
    }
    local = await client.post("/Animal/Create", data={**data, "returnUrl": "/Breeds"})
    assert local.headers["location"] == "/Breeds"

    foreign = await client.post(
        "/Animal/Create", data={**data, "returnUrl": "https://evil.example/"}
    )
    assert foreign.headers["location"] == "/Animal"


async def test_create_with_invalid_input_rerenders_form_with_all_errors(app, client):
    response = await client.post(
        "/Animal/Create",
        data={"Name": "x" * 51, "Description": "", "BreedId": "not-a-number"},
    )
    assert response.status_code == 422
    assert "Name cannot exceed 50 characters" in response.text
    assert "Description is required" in response.text
    assert "Breed is required" in response.text
    # The rejected input is kept in the form
    assert "x" * 51 in response.text
    assert await count_animals(app) == 0


async def test_create_with_unknown_breed_is_rejected(app, client, seeded_breeds):
    response = await client.post(
        "/Animal/Create",
        data={"Name": "Ghost", "Description": "Not real", "BreedId": "999"},
    )
    assert response.status_code == 422
    assert "Selected breed does not exist" in response.text
    assert 'value="Ghost"' in response.text
    assert await count_animals(app) == 0


async def test_edit_with_mismatched_id_is_not_found_and_does_not_write(
    app, client, seeded_animals
):
    rex_id = seeded_animals["rex"]
    response = await client.post(
        f"/Animal/Edit/{rex_id}",
        data={
            "AnimalId": str(seeded_animals["luna"]),
            "Name": "Hacked",
            "Description": "Nope",
            "BreedId": "1",
        },
    )
    assert response.status_code == 404
    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        names = (await session.execute(select(AnimalORM.name))).scalars().all()
    assert "Hacked" not in names


async def test_edit_with_stale_version_is_a_conflict(client, seeded_animals, seeded_breeds):
    rex_id = seeded_animals["rex"]
    data = {
        "AnimalId": str(rex_id),
        "Name": "Rex",
        "Description": "Updated once",
        "BreedId": str(seeded_breeds["labrador"]),
        "Version": "1",
    }
    first = await client.post(f"/Animal/Edit/{rex_id}", data=data)
    assert first.status_code == 303

    second = await client.post(f"/Animal/Edit/{rex_id}", data=data)
    assert second.status_code == 409


async def test_edit_validation_errors_keep_input(client, seeded_animals):
    rex_id = seeded_animals["rex"]
    response = await client.post(
        f"/Animal/Edit/{rex_id}",
        data={"AnimalId": str(rex_id), "Name": "", "Description": "Kept", "BreedId": "999"},
    )
    assert response.status_code == 422
    assert "Name is required" in response.text
    assert "Selected breed does not exist" in response.text
    assert "Kept" in response.text


async def test_unknown_and_malformed_ids_are_not_found(client):
    assert (await client.get("/Animal/Edit/12345")).status_code == 404
    assert (await client.get("/Animal/Delete/12345")).status_code == 404
    assert (await client.post("/Animal/Delete/12345")).status_code == 404
    assert (await client.get("/Animal/Edit/abc")).status_code == 404


async def test_list_is_sorted_by_name(client, seeded_animals):
    response = await client.get("/Animal")
    assert row_names(response.text) == ["Buddy", "Luna", "Rex"]


async def test_create_form_lists_breeds_by_name(client, seeded_breeds):
    response = await client.get("/Animal/Create", params={"returnUrl": "/Breeds"})
    assert response.status_code == 200
    assert response.text.index("Labrador") < response.text.index("Siamese")
    assert 'value="/Breeds"' in response.text


async def test_root_redirects_to_animals(client):
    response = await client.get("/")
    assert response.status_code == 307
    assert response.headers["location"] == "/Animal"


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.text == "Healthy"


async def test_create_rerenders_form_when_database_write_fails(app, client, seeded_breeds):
    async with app.state.engine.begin() as conn:  # type: ignore[attr-defined]
        await conn.run_sync(AnimalORM.__table__.drop)

    response = await client.post(
        "/Animal/Create",
        data={"Name": "Bo", "Description": "Lost", "BreedId": str(seeded_breeds["labrador"])},
    )
    assert response.status_code == 500
    assert "An error occurred while creating the animal." in response.text
    assert 'value="Bo"' in response.text
    assert "Labrador" in response.text
