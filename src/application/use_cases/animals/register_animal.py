from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.animals.create_animal import UNKNOWN_BREED_MESSAGE, CreateAnimalInput
from src.domain.models.animal import Animal
from src.domain.validation import validate_animal_fields

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Form validation failed"
REGISTRATION_FAILED = "An error occurred while registering the animal."


@dataclass(slots=True)
class RegisterAnimalResult:
    success: bool
    message: str | None = None
    errors: list[str] = field(default_factory=list)
    animal: Animal | None = None


async def execute(uow: UnitOfWork, payload: CreateAnimalInput) -> RegisterAnimalResult:
    """Programmatic variant of create_animal.

    Input problems come back as ``success=False`` instead of being raised. Field
    rules are checked before the breed lookup, and the lookup is reported on
    its own, so a caller never sees both kinds of error at once.
    """
    logger.info("Animal registration received", extra={"payload": asdict(payload)})
    try:
        errors = validate_animal_fields(payload.name, payload.description, payload.breed_id)
        if errors:
            return RegisterAnimalResult(
                success=False,
                message=VALIDATION_FAILED,
                errors=[e.message for e in errors],
            )
        if not await uow.breeds.exists(payload.breed_id):
            return RegisterAnimalResult(
                success=False,
                message=VALIDATION_FAILED,
                errors=[UNKNOWN_BREED_MESSAGE],
            )
        animal = Animal.create(
            name=payload.name,
            description=payload.description,
            breed_id=payload.breed_id,
        )
        created = await uow.animals.add(animal)
        await uow.commit()
    except ValidationError as exc:
        await uow.rollback()
        return RegisterAnimalResult(success=False, message=VALIDATION_FAILED, errors=exc.messages())
    except Exception:
        logger.exception("Animal registration failed")
        await uow.rollback()
        return RegisterAnimalResult(success=False, message=REGISTRATION_FAILED)
    return RegisterAnimalResult(success=True, animal=created)
