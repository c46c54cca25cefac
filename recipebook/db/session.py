from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from recipebook.config import settings
import os

class Base(DeclarativeBase):
    pass

def normalize_url(url: str) -> str:
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+psycopg://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url

url = normalize_url(settings.database_url or os.getenv("DATABASE_URL", "sqlite:///./recipes.db"))

connect_args = {}
if url.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

engine = create_engine(
    url,
    connect_args=connect_args,
    pool_pre_ping=True,
    future=True,
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    future=True,
)

def init_db(bind=None):
    from recipebook.models import user, recipe
    Base.metadata.create_all(bind=bind or engine)
