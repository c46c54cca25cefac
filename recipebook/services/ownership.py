# who may change a recipe: the users whose recipe list holds it

import structlog

from recipebook.models.recipe import Recipe
from recipebook.repositories.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class OwnershipPolicy:
    def __init__(self, users: UserRepository):
        self.users = users

    def is_owner(self, recipe: Recipe, user_id: int) -> bool:
        user = self.users.get(user_id)
        if user is None:
            return False
        return recipe in user.recipes

    def remove_ownership(self, recipe: Recipe, user_id: int) -> bool:
        """Drop ``recipe`` from the user's list.

        Returns False without touching anything when the user is unknown or
        does not own the recipe.
        """
        user = self.users.get(user_id)
        if user is None or recipe not in user.recipes:
            logger.info("ownership_denied", recipe_id=recipe.id, user_id=user_id)
            return False
        user.recipes.remove(recipe)
        self.users.save(user)
        return True
