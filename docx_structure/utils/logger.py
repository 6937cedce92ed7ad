"""Central logging configuration for the library."""
from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "DOCX_STRUCTURE_LOG_LEVEL"
_DEFAULT_LEVEL = logging.INFO
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configured_level() -> int:
    """Level named by ``DOCX_STRUCTURE_LOG_LEVEL``, INFO when unset or unknown."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else _DEFAULT_LEVEL
    return level if isinstance(level, int) else _DEFAULT_LEVEL


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger, configuring the root handler on first use."""
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=configured_level(), format=_FORMAT)
    return logger
