# src/eventemitter/logging_setup.py
from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Optional, Union

from eventemitter import settings


def configure_logging(level: Union[int, str, None] = None, *, log_to_file: Optional[bool] = None) -> None:
    """
    Configure root logging with a readable format and optional file sink.
    Falls back to the values in ``settings`` when arguments are omitted.
    """
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            logging.getLogger(__name__).warning("Unknown log level %r; using WARNING", level)
            resolved = logging.WARNING
        level = resolved
    if log_to_file is None:
        log_to_file = settings.LOG_TO_FILE

    logging.basicConfig(level=level, format=settings.LOG_FORMAT, datefmt=settings.LOG_DATEFMT)
    logging.getLogger("eventemitter").setLevel(level)

    # Tone down chatty libraries
    for noisy in settings.NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    if log_to_file:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d-%H%M%S")
        fh = logging.FileHandler(os.path.join(settings.LOG_DIR, f"eventemitter-{ts}.log"), encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(settings.LOG_FORMAT, settings.LOG_DATEFMT))
        logging.getLogger().addHandler(fh)
