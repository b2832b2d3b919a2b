"""Logging configuration for parse_typegen.

All modules obtain their logger through :func:`get_logger` so that output is
namespaced under ``parse_typegen`` and configured in one place.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "parse_typegen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package root logger.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        Logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(
    level: int | str = logging.WARNING,
    use_rich: bool = True,
    console: Console | None = None,
) -> logging.Logger:
    """Configure the package root logger once.

    Args:
        level: Logging level for the package logger.
        use_rich: Use a rich handler; otherwise a plain stream handler.
        console: Console the rich handler writes to (stderr by default).

    Returns:
        The configured root package logger.
    """
    global _configured

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if _configured:
        return logger

    if use_rich:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    logger.addHandler(handler)
    _configured = True
    logger.debug("Logging configured (level=%s, rich=%s)", level, use_rich)
    return logger
