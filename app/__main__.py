from __future__ import annotations

import argparse

import uvicorn

from app.config import get_settings
from app.observability.logging import configure_logging_from_settings


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Request Logger Demo API server")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to bind")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")
    args = parser.parse_args()

    configure_logging_from_settings(settings)
    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=bool(args.reload),
        # Keep the handlers installed by configure_logging_from_settings().
        log_config=None,
    )


if __name__ == "__main__":
    main()
