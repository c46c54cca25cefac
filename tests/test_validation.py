import pytest
from pydantic import ValidationError

from recipebook.schemas.auth import RegisterIn
from recipebook.schemas.recipe import RecipeIn
from recipebook.validation import validate_recipe, validate_registration


def fields(errors):
    return [e.field for e in errors]


def test_valid_registration_has_no_errors():
    assert validate_registration(RegisterIn(email="a@x.com", password="password1")) == []


def test_registration_rejects_bad_email_and_short_password():
    errors = validate_registration(RegisterIn(email="not-an-email", password="short"))
    assert fields(errors) == ["email", "password"]
    assert errors[1].message == "Password must be at least 8 characters long."


def test_registration_blank_password_reports_both_rules():
    errors = validate_registration(RegisterIn(email="a@x.com", password="   "))
    messages = [e.message for e in errors]
    assert "Password must not be empty." in messages
    assert "Password must be at least 8 characters long." in messages


def test_email_needs_a_dot_after_the_at():
    assert fields(validate_registration(RegisterIn(email="a@localhost", password="password1"))) == ["email"]


def test_valid_recipe_has_no_errors():
    dto = RecipeIn(name="Soup", category="Dinner", description="d", ingredients=["salt"], directions=["boil"])
    assert validate_recipe(dto) == []


def test_empty_recipe_reports_every_field():
    errors = validate_recipe(RecipeIn())
    assert fields(errors) == ["name", "category", "description", "ingredients", "directions"]


def test_blank_list_items_are_reported_by_index():
    dto = RecipeIn(
        name="Soup",
        category="Dinner",
        description="d",
        ingredients=["salt", " "],
        directions=["", "boil"],
    )
    assert fields(validate_recipe(dto)) == ["ingredients[1]", "directions[0]"]


def test_recipe_schema_rejects_offset_aware_date():
    with pytest.raises(ValidationError):
        RecipeIn(name="Soup", date="2024-01-01T10:00:00+05:00")
