"""Run the exporter with uvicorn."""

import logging

import uvicorn

from ssa_exporter.core.config import get_settings
from ssa_exporter.main import app

logger = logging.getLogger("ssa_exporter")


def main() -> None:
    settings = get_settings()
    logger.info("listen :%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
