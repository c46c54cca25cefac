"""Field-level checks run by the routes before a service is called.

Each validator returns a list of :class:`FieldError`; an empty list means the
input is acceptable. Pydantic only guarantees the payload shape here, these
functions own the content rules.
"""

import re

from recipebook.exceptions import FieldError, ValidationFailure
from recipebook.schemas.auth import RegisterIn
from recipebook.schemas.recipe import RecipeIn

EMAIL_PATTERN = re.compile(r".+@.+\..+")
MIN_PASSWORD_LENGTH = 8


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_registration(dto: RegisterIn) -> list[FieldError]:
    errors = []
    if not EMAIL_PATTERN.fullmatch(dto.email or ""):
        errors.append(FieldError("email", "Email is not valid."))
    if _blank(dto.password):
        errors.append(FieldError("password", "Password must not be empty."))
    if len(dto.password or "") < MIN_PASSWORD_LENGTH:
        errors.append(FieldError("password", "Password must be at least 8 characters long."))
    return errors


def _validate_steps(field: str, items: list[str] | None, empty_message: str) -> list[FieldError]:
    if not items:
        return [FieldError(field, empty_message)]
    return [
        FieldError(f"{field}[{i}]", "must not be blank")
        for i, item in enumerate(items)
        if _blank(item)
    ]


def validate_recipe(dto: RecipeIn) -> list[FieldError]:
    errors = []
    if _blank(dto.name):
        errors.append(FieldError("name", "Recipe must have a name."))
    if _blank(dto.category):
        errors.append(FieldError("category", "Recipe should be categorized."))
    if _blank(dto.description):
        errors.append(FieldError("description", "Recipe should have a description."))
    errors += _validate_steps(
        "ingredients", dto.ingredients, "Recipe should contain at least one ingredient."
    )
    errors += _validate_steps(
        "directions", dto.directions, "Recipe should have at least one direction to be made."
    )
    return errors


def ensure_valid(errors: list[FieldError]) -> None:
    if errors:
        raise ValidationFailure(errors)
