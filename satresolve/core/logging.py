import logging
import os
import sys

ROOT_LOGGER_NAME = "satresolve"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%SZ"))
        root.addHandler(handler)

    # Library output goes through the package handler only
    root.propagate = False

    level_name = os.getenv("SATRESOLVE_LOG_LEVEL", "INFO").upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    return root

def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger in the satresolve namespace.

    Only the package root logger carries a handler; module loggers propagate
    to it, so `logging.getLogger(__name__)` inside the package behaves the
    same. The level is read from SATRESOLVE_LOG_LEVEL (default INFO).
    """
    _configure_root()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)

# Default library logger
logger = get_logger(ROOT_LOGGER_NAME)
