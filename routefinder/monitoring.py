from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("routefinder")


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the configured level and format to the root logger."""
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        logger.warning(f"Unknown log level {config.level!r}, using INFO")
        level = logging.INFO

    logging.basicConfig(level=level, format=config.format, force=True)
    logger.debug(f"Logging configured at {logging.getLevelName(level)}")
