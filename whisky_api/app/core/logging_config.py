"""
Logging for the ``whisky_api`` logger tree.

Uvicorn installs its own handlers on the ``uvicorn`` loggers before the
application is built, so the root logger is left alone.  Records from
``whisky_api.*`` go through one handler owned by this module.  Calling
``setup_logging`` again replaces that handler instead of stacking a
second one.
"""

import logging
from pathlib import Path
from typing import List, Optional


LOGGER_NAME = "whisky_api"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attribute marking handlers created here.
_OWNED = "_whisky_api_handler"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the ``whisky_api`` logger and return it.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Also write records to this file when given.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _OWNED, True)
        logger.addHandler(handler)

    # Records are fully handled here; passing them to root would print
    # them twice once something configures root.
    logger.propagate = False
    return logger
