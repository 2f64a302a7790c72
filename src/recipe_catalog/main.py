"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from recipe_catalog.api.app import create_app
from recipe_catalog.config import Settings
from recipe_catalog.containers import build_container


def main() -> None:
    """Build the app from environment settings and serve it."""
    settings = Settings()
    app = create_app(build_container(settings))
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        proxy_headers=True,
        forwarded_allow_ips=settings.forwarded_allow_ips,
    )


if __name__ == "__main__":
    main()
