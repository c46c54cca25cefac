import structlog

from recipebook.mappers import apply_recipe, to_recipe, to_view, to_views
from recipebook.models.recipe import Recipe
from recipebook.models.user import User
from recipebook.repositories.recipe_repository import RecipeRepository
from recipebook.schemas.recipe import RecipeIn, RecipeView

logger = structlog.get_logger(__name__)


class RecipeService:
    def __init__(self, recipes: RecipeRepository):
        self.recipes = recipes

    def create(self, data: RecipeIn, author: User) -> int:
        recipe = to_recipe(data, author)
        # both halves of the ownership link land in the same commit
        author.recipes.append(recipe)
        recipe = self.recipes.add(recipe)
        logger.info("recipe_created", recipe_id=recipe.id, author_id=author.id)
        return recipe.id

    def get(self, recipe_id: int) -> Recipe | None:
        return self.recipes.get(recipe_id)

    def get_view(self, recipe_id: int) -> RecipeView | None:
        recipe = self.get(recipe_id)
        if recipe is None:
            return None
        return to_view(recipe)

    def update(self, recipe_id: int, data: RecipeIn) -> None:
        recipe = self.get(recipe_id)
        if recipe is None:
            return
        self.recipes.save(apply_recipe(recipe, data))
        logger.info("recipe_updated", recipe_id=recipe_id)

    def delete(self, recipe: Recipe) -> None:
        """Remove ``recipe``; the caller must already have revoked ownership."""
        recipe_id = recipe.id
        recipe.author = None
        self.recipes.delete(recipe)
        logger.info("recipe_deleted", recipe_id=recipe_id)

    def find_by_name_containing(self, name: str) -> list[RecipeView]:
        if not name:
            return []
        return to_views(self.recipes.find_by_name_containing(name))

    def find_by_category(self, category: str) -> list[RecipeView]:
        return to_views(self.recipes.find_by_category(category))
