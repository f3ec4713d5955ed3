"""Shared logging utilities."""

from __future__ import annotations

import os
import time
from typing import Any

from loguru import logger


def env_log_level(default: str = "INFO") -> str:
    """Return log level string from LOG_LEVEL env (fallback to ``default``)."""
    return os.getenv("LOG_LEVEL", default).upper()


def bind_context(**context: Any):
    """Logger bound with the given extras; ``None`` values are left out."""
    return logger.bind(**{k: v for k, v in context.items() if v is not None})


class Timer:
    """Lightweight context timer for logging durations."""

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        self.elapsed_ms = 0.0
        return self

    def __exit__(self, *exc: object) -> None:
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000
