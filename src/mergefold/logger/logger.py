"""Global logger configuration for the MergeFold project.

The package logger ``mergefold`` owns the only handler. Modules log through
children obtained with ``get_logger(__name__)``, which propagate to it and
inherit its level.
"""

import logging
import os
import sys

__all__ = ["logger", "setup_logger", "get_logger"]

PACKAGE_LOGGER = "mergefold"


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (the package name for the root package logger)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Return the child of the package logger for ``module_name``.

    Args:
        module_name: Usually ``__name__``. Names outside the package are nested
            under it, so ``"scratch"`` becomes ``"mergefold.scratch"``.
    """
    if module_name != PACKAGE_LOGGER and not module_name.startswith(
        PACKAGE_LOGGER + "."
    ):
        module_name = f"{PACKAGE_LOGGER}.{module_name}"
    return logging.getLogger(module_name)


# Create default logger instance for the project
logger = setup_logger()
