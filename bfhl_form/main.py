import uvicorn

from bfhl_form.config.settings import Settings
from bfhl_form.logging.logger import Log
from bfhl_form.web.app import create_app


def main() -> None:
    """Entry point: load settings -> configure logging -> serve the form."""
    settings = Settings()
    Log.configure(settings.log_level)
    app = create_app(settings)
    Log.info(
        f"Serving form on http://{settings.host}:{settings.port} "
        f"(remote provider: {settings.remote_provider})"
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
