from __future__ import annotations

from src.application.errors import ReferentialIntegrityError
from src.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, breed_id: int) -> bool:
    """Delete the breed if it exists; returns False when there was nothing to delete."""
    existing = await uow.breeds.get(breed_id)
    if not existing:
        return False
    # Animals never cascade with their breed
    refs = await uow.animals.count_by_breed_id(breed_id)
    if refs > 0:
        raise ReferentialIntegrityError(
            "Breed is referenced by animals", details={"breed_id": breed_id, "animals": refs}
        )
    deleted = await uow.breeds.delete(breed_id)
    await uow.commit()
    return deleted
