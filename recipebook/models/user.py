
from sqlalchemy import Column, Integer, String, ForeignKey, Table
from sqlalchemy.orm import relationship
from recipebook.db.session import Base

DEFAULT_ROLE = "ROLE_USER"

# ownership list kept on the user side; Recipe.author is the other half
user_recipes = Table(
    "user_recipes",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id"), primary_key=True),
    Column("recipe_id", Integer, ForeignKey("recipes.id"), primary_key=True),
)

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default=DEFAULT_ROLE)

    recipes = relationship("Recipe", secondary=user_recipes, order_by="Recipe.id")
