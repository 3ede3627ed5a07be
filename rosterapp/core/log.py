# rosterapp/core/log.py
import logging

from rosterapp.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install a single stream handler on the root logger (idempotent)."""
    root = logging.getLogger()
    root.setLevel(level or settings.LOG_LEVEL)
    if any(getattr(h, "_rosterapp", False) for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._rosterapp = True
    root.addHandler(handler)
