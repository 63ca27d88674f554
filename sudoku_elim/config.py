from __future__ import annotations

import logging
from dataclasses import dataclass

from .board import DEFAULT_ORDER
from .gridio import OUTPUT_SUFFIX

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    order: int = DEFAULT_ORDER
    log_level: str = "WARNING"
    output_suffix: str = OUTPUT_SUFFIX


def setup_logging(level: str = "WARNING") -> None:
    """Send library logs to stderr; user-facing output stays on stdout."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
