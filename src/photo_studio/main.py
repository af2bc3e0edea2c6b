"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from photo_studio.api.app import create_app
from photo_studio.config import Settings
from photo_studio.containers import build_container


def main() -> None:
    """Run the photo studio API server."""
    settings = Settings()
    app = create_app(build_container(settings))
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug_mode else "info",
    )


if __name__ == "__main__":
    main()
