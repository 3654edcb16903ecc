"""
Basic logging configuration for the application.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Records are formatted as
``timestamp [LEVEL] logger: message``.  Some third‑party loggers are
chatty at INFO or WARNING level; the Google API client, for example,
warns about its discovery cache every time a service is built.  Those
are raised to ERROR.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional


NOISY_LOGGERS = ("googleapiclient.discovery_cache", "google_auth_httplib2")

# Marks the handlers installed here, so handlers added by other code
# (pytest log capture, for instance) do not count as configuration.
HANDLER_TAG = "_ride_sheets_handler"


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
    logger_name: Optional[str] = None,
) -> None:
    """Configure the root logger, or ``logger_name`` when given.

    Calling this more than once (for example when tests import the
    application repeatedly) leaves the handlers it installed untouched.
    Handlers attached by anything else are ignored.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
    quiet : Iterable[str]
        Logger names whose level is raised to ``ERROR``.
    logger_name : Optional[str]
        Logger to configure; the root logger when omitted.
    """
    for name in quiet:
        logging.getLogger(name).setLevel(logging.ERROR)

    logger = logging.getLogger(logger_name)
    if any(getattr(handler, HANDLER_TAG, False) for handler in logger.handlers):
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, HANDLER_TAG, True)
        logger.addHandler(handler)
