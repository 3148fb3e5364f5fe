"""Entry point for serving the resolver over HTTP."""

import uvicorn

from google_dns_api.core.config import get_settings


def main():
    """Run the application."""
    settings = get_settings()

    uvicorn.run(
        "google_dns_api.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
