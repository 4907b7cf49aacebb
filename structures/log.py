"""Logger access for the structures and benchmark components."""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "STRUCTBENCH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def log_level() -> int:
  """Return the level named by ``STRUCTBENCH_LOG_LEVEL`` (default WARNING)."""
  raw = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
  level = logging.getLevelName(raw)
  if not isinstance(level, int):
    raise ValueError(f"Unknown log level in {LOG_LEVEL_ENV}: {raw!r}")
  return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
  """Return the ``structbench`` logger (or a child of it) at the configured level."""
  logger_name = "structbench" if name is None else f"structbench.{name}"
  logger = logging.getLogger(logger_name)
  logger.setLevel(log_level())
  return logger
