from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from src.application.errors import ValidationError
from src.application.use_cases.breeds import (
    create_breed,
    delete_breed,
    get_breed,
    list_breeds,
    update_breed,
)
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import get_uow
from src.interfaces.http.schemas.breeds import BreedForm
from src.interfaces.http.views import render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/Breeds", tags=["breeds"])

LIST_URL = "/Breeds"


def _render_form(
    request: Request,
    form: BreedForm,
    *,
    mode: str,
    errors: dict[str, list[str]] | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    return render(
        request,
        "breeds/form.html",
        {"form": form, "mode": mode, "errors": errors or {}},
        status_code=status_code,
    )


async def _read_form(request: Request) -> BreedForm:
    data = await request.form()
    return BreedForm.model_validate(dict(data))


@router.get("", response_class=HTMLResponse)
@router.get("/Index", response_class=HTMLResponse)
async def index(request: Request, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    breeds = await list_breeds.execute(uow)
    return render(request, "breeds/index.html", {"breeds": breeds})


@router.get("/Details/{breed_id}", response_class=HTMLResponse)
async def details(request: Request, breed_id: int, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    breed = await get_breed.execute(uow, breed_id, include_animals=True)
    return render(request, "breeds/details.html", {"breed": breed})


@router.get("/Create", response_class=HTMLResponse)
async def create_form(request: Request):
    return _render_form(request, BreedForm(), mode="create")


@router.post("/Create")
async def create(request: Request, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    form = await _read_form(request)
    try:
        created = await create_breed.execute(uow, form.to_create_input())
    except ValidationError as exc:
        return _render_form(
            request, form, mode="create", errors=exc.by_field(), status_code=exc.status_code
        )
    logger.info("Breed created", extra={"breed_id": created.id})
    return RedirectResponse(LIST_URL, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/Edit/{breed_id}", response_class=HTMLResponse)
async def edit_form(request: Request, breed_id: int, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    breed = await get_breed.execute(uow, breed_id)
    return _render_form(request, BreedForm.from_breed(breed), mode="edit")


@router.post("/Edit/{breed_id}")
async def edit(request: Request, breed_id: int, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    form = await _read_form(request)
    try:
        await update_breed.execute(uow, breed_id, form.to_update_input())
    except ValidationError as exc:
        return _render_form(
            request, form, mode="edit", errors=exc.by_field(), status_code=exc.status_code
        )
    return RedirectResponse(LIST_URL, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/Delete/{breed_id}", response_class=HTMLResponse)
async def delete_confirmation(
    request: Request, breed_id: int, uow: SQLAlchemyUnitOfWork = Depends(get_uow)
):
    breed = await get_breed.execute(uow, breed_id)
    return render(request, "breeds/delete.html", {"breed": breed})


@router.post("/Delete/{breed_id}")
async def delete_confirmed(breed_id: int, uow: SQLAlchemyUnitOfWork = Depends(get_uow)):
    if await delete_breed.execute(uow, breed_id):
        logger.info("Breed deleted", extra={"breed_id": breed_id})
    return RedirectResponse(LIST_URL, status_code=status.HTTP_303_SEE_OTHER)
