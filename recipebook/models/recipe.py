
from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship, validates
from recipebook.db.session import Base

def fold(value: str | None) -> str | None:
    return value.casefold() if value is not None else None

class Recipe(Base):
    __tablename__ = "recipes"
    id = Column(Integer, primary_key=True, index=True)
    author_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    category = Column(String(120), nullable=False)
    # searches compare against these; SQLite lower() only folds ASCII
    name_folded = Column(String(255), nullable=False, index=True)
    category_folded = Column(String(120), nullable=False, index=True)
    date = Column(DateTime, nullable=False, default=datetime.now, index=True)
    description = Column(Text, nullable=False)
    ingredients = Column(JSON, nullable=False, default=list)
    directions = Column(JSON, nullable=False, default=list)

    author = relationship("User")

    @validates("name")
    def _fold_name(self, key, value):
        self.name_folded = fold(value)
        return value

    @validates("category")
    def _fold_category(self, key, value):
        self.category_folded = fold(value)
        return value
