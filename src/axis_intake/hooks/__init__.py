"""Process-level hooks: structured logging."""

from __future__ import annotations

from axis_intake.hooks.logging_config import setup_logging

__all__ = ["setup_logging"]
