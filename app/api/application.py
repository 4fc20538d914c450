from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.dependencies import get_settings
from app.api.errors import register_exception_handlers
from app.api.routes import downloads, extract, lead, tailoring
from app.config.settings import Settings
from app.logging.logger import Log


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application: logging -> CORS -> error handlers -> routes."""
    settings = settings or get_settings()
    Log.configure(settings.log_level)

    app = FastAPI(title="Resume Tailor API")
    app.dependency_overrides[get_settings] = lambda: settings
    if settings.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.allowed_origins,
            allow_methods=["*"],
            allow_headers=["*"],
            allow_credentials=False,
        )
    register_exception_handlers(app)

    app.include_router(extract.router)
    app.include_router(tailoring.router)
    app.include_router(downloads.router)
    app.include_router(lead.router)

    Log.info(f"Application created (env={settings.app_env})")
    return app
