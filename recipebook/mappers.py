"""Explicit conversions between request/response schemas and ORM rows."""

from recipebook.models.recipe import Recipe
from recipebook.models.user import User, DEFAULT_ROLE
from recipebook.schemas.auth import RegisterIn
from recipebook.schemas.recipe import RecipeIn, RecipeView


def to_recipe(dto: RecipeIn, author: User) -> Recipe:
    return Recipe(
        author=author,
        name=dto.name,
        category=dto.category,
        date=dto.date,
        description=dto.description,
        ingredients=list(dto.ingredients or []),
        directions=list(dto.directions or []),
    )


def apply_recipe(recipe: Recipe, dto: RecipeIn) -> Recipe:
    # id and author stay as they are
    recipe.name = dto.name
    recipe.category = dto.category
    recipe.date = dto.date
    recipe.description = dto.description
    recipe.ingredients = list(dto.ingredients or [])
    recipe.directions = list(dto.directions or [])
    return recipe


def to_view(recipe: Recipe) -> RecipeView:
    return RecipeView(
        name=recipe.name,
        category=recipe.category,
        date=recipe.date,
        description=recipe.description,
        ingredients=list(recipe.ingredients),
        directions=list(recipe.directions),
    )


def to_views(recipes: list[Recipe]) -> list[RecipeView]:
    return [to_view(r) for r in recipes]


def to_user(dto: RegisterIn, password_hash: str) -> User:
    return User(email=dto.email, password=password_hash, role=DEFAULT_ROLE, recipes=[])
