"""Central logging setup for the gateway."""
from __future__ import annotations
import logging
import sys

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

def setup_logging(level: int = logging.INFO) -> None:
    """
    Configure root logger with a stdout handler.

    uvicorn loggers lose their own handlers and propagate to root, so server
    and gateway lines share one format whether or not uvicorn set them up first.

    Args:
        level: Logging level.
    """
    handler = logging.StreamHandler(sys.stdout)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    for name in UVICORN_LOGGERS:
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True
