from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from src.application.errors import InfrastructureError, ValidationError
from src.application.use_cases.animals import (
    create_animal,
    delete_animal,
    get_animal,
    list_animals,
    register_animal,
    search_animals,
    update_animal,
)
from src.application.use_cases.breeds import list_breeds
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import get_uow
from src.interfaces.http.schemas.animals import AnimalForm, RegisterAnimalResponse
from src.interfaces.http.views import render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/Animal", tags=["animals"])

LIST_URL = "/Animal"
CREATE_FAILED = "An error occurred while creating the animal."
UPDATE_FAILED = "An error occurred while updating the animal."


async def _render_form(
    request: Request,
    uow: SQLAlchemyUnitOfWork,
    form: AnimalForm,
    *,
    mode: str,
    errors: dict[str, list[str]] | None = None,
    general_error: str | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    breeds = await list_breeds.execute(uow, order_by_name=True)
    return render(
        request,
        "animal/form.html",
        {
            "form": form,
            "mode": mode,
            "breeds": breeds,
            "errors": errors or {},
            "general_error": general_error,
        },
        status_code=status_code,
    )


async def _read_form(request: Request) -> AnimalForm:
    data = await request.form()
    return AnimalForm.model_validate(dict(data))


@router.get("", response_class=HTMLResponse)
@router.get("/Index", response_class=HTMLResponse)
async def index(request: Request, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    animals = await list_animals.execute(uow)
    return render(request, "animal/index.html", {"animals": animals, "search_term": ""})


@router.get("/Search", response_class=HTMLResponse)
async def search(
    request: Request,
    search_term: str | None = Query(None, alias="searchTerm"),
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
):
    animals = await search_animals.execute(uow, search_term)
    return render(
        request, "animal/index.html", {"animals": animals, "search_term": search_term or ""}
    )


@router.get("/Create", response_class=HTMLResponse)
async def create_form(
    request: Request,
    return_url: str | None = Query(None, alias="returnUrl"),
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
):
    return await _render_form(request, uow, AnimalForm(return_url=return_url), mode="create")


@router.post("/Create")
async def create(request: Request, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    form = await _read_form(request)
    try:
        result = await create_animal.execute(
            uow, form.to_create_input(), return_url=form.return_url
        )
    except ValidationError as exc:
        await uow.rollback()
        return await _render_form(
            request,
            uow,
            form,
            mode="create",
            errors=exc.by_field(),
            status_code=exc.status_code,
        )
    except InfrastructureError as exc:
        logger.exception("Animal creation failed")
        await uow.rollback()
        return await _render_form(
            request,
            uow,
            form,
            mode="create",
            general_error=CREATE_FAILED,
            status_code=exc.status_code,
        )
    logger.info("Animal created", extra={"animal_id": result.animal.id})
    return RedirectResponse(result.redirect_url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/Edit/{animal_id}", response_class=HTMLResponse)
async def edit_form(
    request: Request, animal_id: int, uow: SQLAlchemyUnitOfWork = Depends(get_uow)
):
    animal = await get_animal.execute(uow, animal_id)
    return await _render_form(request, uow, AnimalForm.from_animal(animal), mode="edit")


@router.post("/Edit/{animal_id}")
async def edit(request: Request, animal_id: int, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    form = await _read_form(request)
    try:
        await update_animal.execute(uow, animal_id, form.to_update_input())
    except ValidationError as exc:
        await uow.rollback()
        return await _render_form(
            request,
            uow,
            form,
            mode="edit",
            errors=exc.by_field(),
            status_code=exc.status_code,
        )
    except InfrastructureError as exc:
        logger.exception("Animal update failed", extra={"animal_id": animal_id})
        await uow.rollback()
        return await _render_form(
            request,
            uow,
            form,
            mode="edit",
            general_error=UPDATE_FAILED,
            status_code=exc.status_code,
        )
    return RedirectResponse(LIST_URL, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/Delete/{animal_id}", response_class=HTMLResponse)
async def delete_confirmation(
    request: Request, animal_id: int, uow: SQLAlchemyUnitOfWork = Depends(get_uow)
):
    animal = await get_animal.execute(uow, animal_id)
    return render(request, "animal/delete.html", {"animal": animal})


@router.post("/Delete/{animal_id}")
async def delete_confirmed(animal_id: int, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    await delete_animal.execute(uow, animal_id)
    logger.info("Animal deleted", extra={"animal_id": animal_id})
    return RedirectResponse(LIST_URL, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/Register", response_class=HTMLResponse)
async def register_form(request: Request, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    breeds = await list_breeds.execute(uow, order_by_name=True)
    return render(request, "animal/register.html", {"breeds": breeds})


@router.post("/Register", response_model=RegisterAnimalResponse)
async def register(request: Request, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith("application/json"):
            body = await request.json()
            if not isinstance(body, dict):
                raise ValueError("JSON body must be an object")
            form = AnimalForm.model_validate(body)
        else:
            form = await _read_form(request)
    except ValueError:
        # Covers malformed JSON and pydantic's ValidationError
        response = RegisterAnimalResponse(
            success=False,
            message=register_animal.VALIDATION_FAILED,
            errors=["Request body could not be read"],
        )
        return JSONResponse(response.model_dump(exclude_none=True))
    result = await register_animal.execute(uow, form.to_create_input())
    response = RegisterAnimalResponse.from_result(result)
    return JSONResponse(response.model_dump(exclude_none=True))
