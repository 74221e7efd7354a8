"""Run the API with uvicorn: ``python -m maintenance_api``.

If the database can't be reached the lifespan startup fails and uvicorn
exits with a non-zero status.
"""

import logging

import uvicorn

from maintenance_api.core.config import settings
from maintenance_api.main import app

logger = logging.getLogger("maintenance_api")


def main() -> None:
    logger.info("starting server on http://%s:%s...", settings.app_host, settings.app_port)
    uvicorn.run(
        app,
        host=settings.app_host,
        port=settings.app_port,
        lifespan="on",
        log_level="debug" if settings.app_env == "development" else "info",
    )


if __name__ == "__main__":
    main()
