"""
Logging setup for the blog API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Uvicorn's own loggers propagate to the
root logger, so server and application messages share one format.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handlers installed by ``setup_logging``; tagged so that a forced
# reconfiguration only removes its own handlers.
_HANDLER_MARK = "_blog_api_handler"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, force: bool = False) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Also write log records to this file when given.
    force : bool
        Replace handlers previously installed by this function instead
        of leaving an existing configuration alone.  ``run.py`` uses
        this to apply command-line options after the module-level
        application has already configured logging.
    """
    root = logging.getLogger()
    ours = [h for h in root.handlers if getattr(h, _HANDLER_MARK, False)]
    if root.handlers and not (force and ours):
        if force:
            root.setLevel(getattr(logging, level.upper(), logging.INFO))
        return
    for handler in ours:
        root.removeHandler(handler)
        handler.close()

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        setattr(handler, _HANDLER_MARK, True)
        handler.setFormatter(formatter)
        root.addHandler(handler)
