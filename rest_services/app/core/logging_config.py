"""
Logging setup shared by both services and the launcher.

``build_logging_config`` returns a ``logging.config.dictConfig`` mapping
in which the application loggers, uvicorn's loggers and urllib3 all
write through the root handlers with one format.  ``run.py`` hands the
same mapping to uvicorn as ``log_config`` so uvicorn installs no
handlers of its own; the application factories apply it through
``setup_logging`` when the apps are imported some other way (tests,
``uvicorn rest_services.app.main:products_app``).
"""

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def _level_name(level: str) -> str:
    name = level.upper()
    return name if isinstance(logging.getLevelName(name), int) else "INFO"


def build_logging_config(level: str = "INFO", logfile: Optional[str] = None) -> Dict[str, Any]:
    """Return the dictConfig mapping for ``level`` and an optional log file.

    Unknown level names fall back to ``INFO``.  urllib3 never logs below
    ``INFO``: its DEBUG lines carry the upstream query string, weather
    API key included.
    """
    level = _level_name(level)
    urllib3_level = logging.getLevelName(max(logging.getLevelName(level), logging.INFO))

    handlers: Dict[str, Dict[str, Any]] = {
        "console": {"class": "logging.StreamHandler", "formatter": "default"},
    }
    if logfile:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": str(Path(logfile).resolve()),
            "encoding": "utf-8",
            "formatter": "default",
        }

    uvicorn_logger = {"level": level, "handlers": [], "propagate": True}
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT}},
        "handlers": handlers,
        "root": {"level": level, "handlers": list(handlers)},
        "loggers": {
            "uvicorn": dict(uvicorn_logger),
            "uvicorn.error": dict(uvicorn_logger),
            "uvicorn.access": dict(uvicorn_logger),
            "urllib3": {"level": urllib3_level},
        },
    }


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Apply ``build_logging_config`` once per process."""
    global _configured
    if _configured:
        return
    logging.config.dictConfig(build_logging_config(level, logfile))
    _configured = True
