"""Run the proxy with uvicorn: ``python -m app``."""

from __future__ import annotations

import logging

import uvicorn

from app.core.config import get_settings


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper()), format="%(asctime)s %(levelname)s %(message)s")


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logging.getLogger(__name__).info(
        "USPTO lookup proxy listening on %s:%s", settings.host, settings.port
    )
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
