# data access for recipes; searches are newest first

from sqlalchemy.orm import Session
from recipebook.models.recipe import Recipe, fold

class RecipeRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, recipe_id: int) -> Recipe | None:
        return self.db.get(Recipe, recipe_id)

    def add(self, recipe: Recipe) -> Recipe:
        self.db.add(recipe)
        self.db.commit()
        self.db.refresh(recipe)
        return recipe

    def save(self, recipe: Recipe) -> Recipe:
        self.db.add(recipe)
        self.db.commit()
        self.db.refresh(recipe)
        return recipe

    def delete(self, recipe: Recipe) -> None:
        self.db.delete(recipe)
        self.db.commit()

    def _newest_first(self, query):
        return query.order_by(Recipe.date.desc(), Recipe.id.desc()).all()

    def find_by_name_containing(self, name: str) -> list[Recipe]:
        query = self.db.query(Recipe).filter(Recipe.name_folded.contains(fold(name), autoescape=True))
        return self._newest_first(query)

    def find_by_category(self, category: str) -> list[Recipe]:
        query = self.db.query(Recipe).filter(Recipe.category_folded == fold(category))
        return self._newest_first(query)
