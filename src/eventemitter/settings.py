# src/eventemitter/settings.py
"""
Centralized settings and constants for the emitter package.

Values may be overridden through the environment; they are read once at import.
"""
import logging
import os

_LOG = logging.getLogger(__name__)

# --- Logging ---
LOG_LEVEL = os.environ.get("EVENTEMITTER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LOG_TO_FILE = os.environ.get("EVENTEMITTER_LOG_FILE", "0") == "1"
LOG_DIR = "logs"

# Third-party loggers that get clamped to WARNING
NOISY_LOGGERS = ("pygame", "PIL", "asyncio")

# --- Pooling ---
# Instances pre-built by every ObjectPool unless told otherwise
try:
    DEFAULT_POOL_SIZE = max(0, int(os.environ.get("EVENTEMITTER_POOL_SIZE", "8")))
except ValueError:
    _LOG.warning(
        "Ignoring invalid EVENTEMITTER_POOL_SIZE=%r; using 8", os.environ.get("EVENTEMITTER_POOL_SIZE")
    )
    DEFAULT_POOL_SIZE = 8
