from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the configured level and format to the root logger.

    Existing root handlers are kept; only the level is updated then.
    """
    config = config or get_config().observability
    level = config.level.upper()

    logging.basicConfig(level=level, format=config.format)
    logging.getLogger().setLevel(level)
    logging.getLogger(__name__).debug("Logging configured", extra={"level": level})
