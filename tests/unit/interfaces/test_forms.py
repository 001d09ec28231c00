from __future__ import annotations

from src.application.use_cases.animals.register_animal import RegisterAnimalResult
from src.domain.models.animal import Animal
from src.interfaces.http.schemas.animals import AnimalForm, RegisterAnimalResponse
from src.interfaces.http.schemas.breeds import BreedForm


def test_animal_form_binds_posted_field_names():
    form = AnimalForm.model_validate(
        {
            "AnimalId": "7",
            "Name": "Rex",
            "Description": "Good boy",
            "BreedId": "2",
            "Version": "3",
            "returnUrl": "/Breeds",
        }
    )
    payload = form.to_update_input()
    assert (payload.animal_id, payload.name, payload.breed_id, payload.version) == (7, "Rex", 2, 3)
    assert form.return_url == "/Breeds"


def test_animal_form_turns_garbage_ids_into_none():
    form = AnimalForm.model_validate({"Name": "Rex", "BreedId": "abc", "AnimalId": ""})
    assert form.breed_id is None
    assert form.animal_id is None


def test_animal_form_accepts_snake_case_json():
    form = AnimalForm.model_validate({"name": "Rex", "description": 12, "breed_id": 4})
    payload = form.to_create_input()
    assert payload.description == "12"
    assert payload.breed_id == 4


def test_animal_form_round_trips_from_entity():
    animal = Animal(id=5, name="Luna", description="Cat", breed_id=2, version=4)
    form = AnimalForm.from_animal(animal)
    assert form.animal_id == 5
    assert form.version == 4


def test_breed_form_binds_breed_name():
    form = BreedForm.model_validate({"BreedId": "3", "BreedName": "Lab", "Description": "Dog"})
    payload = form.to_update_input()
    assert (payload.breed_id, payload.name, payload.description) == (3, "Lab", "Dog")


def test_register_response_omits_empty_errors():
    ok = RegisterAnimalResponse.from_result(
        RegisterAnimalResult(
            success=True, animal=Animal(id=9, name="Rex", description="x", breed_id=1)
        )
    )
    assert ok.model_dump(exclude_none=True) == {"success": True, "animal_id": 9}
