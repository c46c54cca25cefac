
from typing import Annotated
from fastapi import APIRouter, Depends, Path, Request, Response, status
from recipebook.auth.deps import (
    get_ownership_policy,
    get_recipe_service,
    get_user_service,
    requires_authentication,
)
from recipebook.auth.service import Principal
from recipebook.exceptions import FieldError, Forbidden, PrincipalNotFound, RecipeNotFound, ValidationFailure
from recipebook.schemas.recipe import RecipeCreated, RecipeIn, RecipeView
from recipebook.services.ownership import OwnershipPolicy
from recipebook.services.recipes import RecipeService
from recipebook.services.users import UserService
from recipebook.validation import ensure_valid, validate_recipe

router = APIRouter(prefix="/api/recipe", tags=["recipes"])

SEARCH_KEYS = ("name", "category")

# ids are 64-bit in the database
RecipeId = Annotated[int, Path(ge=1, le=2**63 - 1)]

@router.post("/new", response_model=RecipeCreated)
@router.post("/new/", response_model=RecipeCreated, include_in_schema=False)
def create_recipe(
    body: RecipeIn,
    principal: Principal = Depends(requires_authentication),
    users: UserService = Depends(get_user_service),
    recipes: RecipeService = Depends(get_recipe_service),
):
    ensure_valid(validate_recipe(body))
    user = users.get_user(principal.id)
    if user is None:
        raise PrincipalNotFound()
    return RecipeCreated(id=recipes.create(body, user))

# declared before /{recipe_id} so "search" is not parsed as an id
@router.get("/search", response_model=list[RecipeView])
@router.get("/search/", response_model=list[RecipeView], include_in_schema=False)
def search_recipes(
    request: Request,
    principal: Principal = Depends(requires_authentication),
    recipes: RecipeService = Depends(get_recipe_service),
):
    params = request.query_params
    if len(params.keys()) != 1:
        raise ValidationFailure([FieldError("query", "Exactly one of 'name' or 'category' is required.")])
    key = next(iter(params.keys()))
    if key not in SEARCH_KEYS:
        raise ValidationFailure([FieldError(key, "Unknown search key.")])
    values = params.getlist(key)
    if len(values) != 1 or not values[0].strip():
        raise ValidationFailure([FieldError(key, "must not be blank")])
    if key == "name":
        return recipes.find_by_name_containing(values[0])
    return recipes.find_by_category(values[0])

@router.get("/{recipe_id}", response_model=RecipeView)
@router.get("/{recipe_id}/", response_model=RecipeView, include_in_schema=False)
def get_recipe(
    recipe_id: RecipeId,
    principal: Principal = Depends(requires_authentication),
    recipes: RecipeService = Depends(get_recipe_service),
):
    view = recipes.get_view(recipe_id)
    if view is None:
        raise RecipeNotFound()
    return view

@router.put("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
@router.put("/{recipe_id}/", status_code=status.HTTP_204_NO_CONTENT, include_in_schema=False)
def update_recipe(
    recipe_id: RecipeId,
    body: RecipeIn,
    principal: Principal = Depends(requires_authentication),
    recipes: RecipeService = Depends(get_recipe_service),
    ownership: OwnershipPolicy = Depends(get_ownership_policy),
):
    ensure_valid(validate_recipe(body))
    recipe = recipes.get(recipe_id)
    if recipe is None:
        raise RecipeNotFound()
    if not ownership.is_owner(recipe, principal.id):
        raise Forbidden()
    recipes.update(recipe_id, body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
@router.delete("/{recipe_id}/", status_code=status.HTTP_204_NO_CONTENT, include_in_schema=False)
def delete_recipe(
    recipe_id: RecipeId,
    principal: Principal = Depends(requires_authentication),
    recipes: RecipeService = Depends(get_recipe_service),
    ownership: OwnershipPolicy = Depends(get_ownership_policy),
):
    recipe = recipes.get(recipe_id)
    if recipe is None:
        raise RecipeNotFound()
    if not ownership.remove_ownership(recipe, principal.id):
        raise Forbidden()
    recipes.delete(recipe)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
