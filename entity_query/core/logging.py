"""Logging configuration for the entity_query package."""

import logging

from entity_query.core.settings import Settings, get_settings

PACKAGE_LOGGER_NAME = "entity_query"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply the configured level and format to the package logger.

    The root logger is left untouched. Calling this more than once
    replaces the handler installed by a previous call.

    Args:
        settings: Settings to apply. Defaults to get_settings().

    Returns:
        The configured package logger.
    """
    settings = settings or get_settings()
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(settings.effective_log_level)

    for handler in list(logger.handlers):
        if getattr(handler, "_entity_query_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(settings.log_format))
    handler._entity_query_handler = True  # pyright: ignore[reportAttributeAccessIssue]
    logger.addHandler(handler)
    return logger
