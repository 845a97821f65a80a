"""Evaluation settings and logging setup."""

from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class EvalConfig:
    """Settings for the multi-step evaluator.

    Args:
        max_steps: Upper bound on reduction steps, or ``None`` to run until a
            normal form is reached.
        log_level: Level used by :func:`setup_logging` when none is given.
    """

    max_steps: int | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.max_steps is not None and self.max_steps < 0:
            raise ValueError("max_steps must be non-negative")


_config: EvalConfig | None = None


def get_config() -> EvalConfig:
    """Return the process-wide default configuration."""
    global _config
    if _config is None:
        _config = EvalConfig()
    return _config


def set_config(config: EvalConfig | None) -> None:
    """Replace the process-wide default; ``None`` restores the defaults."""
    global _config
    _config = config


def setup_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or get_config().log_level).upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


__all__ = ["EvalConfig", "get_config", "set_config", "setup_logging"]
