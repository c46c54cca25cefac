
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, NaiveDatetime

class RecipeIn(BaseModel):
    name: str = ""
    category: str = ""
    # stored as a naive local timestamp; offset-aware input is rejected
    date: NaiveDatetime = Field(default_factory=datetime.now)
    description: str = ""
    ingredients: list[str] | None = None
    directions: list[str] | None = None

class RecipeView(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    category: str
    date: datetime
    description: str
    ingredients: list[str]
    directions: list[str]

class RecipeCreated(BaseModel):
    id: int
