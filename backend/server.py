from __future__ import annotations

import logging
import os
import sys

import uvicorn
from dotenv import load_dotenv

# Load .env from backend dir (where server.py runs)
load_dotenv(os.path.join(os.path.dirname(__file__), ".env"))

from app.config import ConfigError, Settings  # noqa: E402


def main() -> None:
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO)
        logging.error("Invalid configuration: %s", e)
        sys.exit(1)

    logging.basicConfig(level=settings.log_level)

    from app.main import create_app

    app = create_app(settings)
    for route in app.routes:
        if hasattr(route, "path") and hasattr(route, "methods"):
            logging.info("App route: %s %s", sorted(route.methods) if route.methods else "GET", route.path)

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
