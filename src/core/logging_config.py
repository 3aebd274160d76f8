"""Logging setup for the application entrypoint. Modules only create their own logger via logging.getLogger(__name__)."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # SQLAlchemy echo has its own handler, avoid printing every statement twice
    logging.getLogger("sqlalchemy.engine").propagate = False
