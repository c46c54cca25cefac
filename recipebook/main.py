
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from recipebook.config import settings
from recipebook.db.session import init_db
from recipebook.exceptions import register_exception_handlers
from recipebook.logging_config import setup_logging
from recipebook.auth.routes import router as auth_router
from recipebook.recipes.routes import router as recipes_router

def create_app() -> FastAPI:
    setup_logging(settings.log_level, settings.log_json)
    app = FastAPI(title=settings.app_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(recipes_router)

    @app.on_event("startup")
    def on_startup():
        init_db()

    @app.get("/", tags=["root"])
    def root():
        return {"name": settings.app_name, "env": settings.app_env}

    return app

app = create_app()
