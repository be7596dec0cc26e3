"""
Shared logger for the collage builder.

The layout engine, the image loaders, the renderer and the CLI all log
through ``logger`` so a single ``-v`` flag controls how much of the row
packing is reported.
"""

import logging

LOGGER_NAME = "hybrid_collage"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _attach_handler(
        target: logging.Logger,
        formatter: logging.Formatter | None,
        handler: logging.Handler | None,
) -> None:
    out = handler if handler is not None else logging.StreamHandler()
    out.setFormatter(formatter or logging.Formatter(LOG_FORMAT))
    target.addHandler(out)


def setup_logger(
        name: str = LOGGER_NAME,
        level: int = logging.INFO,
        formatter: logging.Formatter | None = None,
        handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Return the logger ``name`` with one console handler attached.

    The handler is added on the first call only; later calls just reset
    the level. Records do not propagate to the root logger.
    """
    configured = logging.getLogger(name)
    configured.setLevel(level)
    if configured.handlers:
        return configured

    _attach_handler(configured, formatter, handler)
    configured.propagate = False
    return configured


def set_verbosity(*, verbose: bool) -> None:
    """Log every packed row at DEBUG when ``verbose``, else INFO only."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


logger = setup_logger()
