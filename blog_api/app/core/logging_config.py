"""
Logging configuration for the blog backend.

Handlers are attached to the ``blog_api`` package logger rather than
the root logger, so the server's own logging (uvicorn's access log for
instance) keeps its configuration.  Records look like::

    2024-01-01 12:00:00 [INFO] blog_api.app.services.post_service: Created post 3 (published=True)
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "blog_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the package logger and return it.

    The level is applied on every call so each application built by
    ``create_app`` gets the level of its settings.  The console handler
    is attached once; a file handler is attached once per log file.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        attached = {getattr(h, "baseFilename", None) for h in logger.handlers}
        if str(log_path) not in attached:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
    return logger
