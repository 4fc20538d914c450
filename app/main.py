import uvicorn

from app.api.application import create_app
from app.config.settings import Settings


def main() -> None:
    """Entry point: load settings -> build app -> serve."""
    settings = Settings()
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
