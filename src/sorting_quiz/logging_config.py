"""
Logging setup for the API server and the terminal quiz

Verbosity follows config.logging: DEBUG when APP_ENV=development, INFO
otherwise, and LOG_LEVEL wins over both. At DEBUG the gateway logs every
prompt it submits and every raw reply it receives.
"""

import logging
import sys
from typing import Optional

from .config import config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Attach a stdout handler to the root logger and set its level.

    Args:
        level: Explicit level name; defaults to config.logging.level
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level or config.logging.level)
