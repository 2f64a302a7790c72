"""Logging configuration helpers."""

import logging

DEFAULT_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str = "INFO", fmt: str = DEFAULT_FORMAT) -> None:
    """Attach one stream handler to the package logger and apply level/format.

    Repeated calls reuse the existing handler, so the level and format from
    the latest settings win without duplicating output.
    """
    logger = logging.getLogger("recipe_catalog")
    logger.setLevel(level.upper())
    logger.propagate = False
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler())
    for handler in logger.handlers:
        handler.setFormatter(logging.Formatter(fmt))
