"""Runtime input helpers exposed by the public API."""

from __future__ import annotations

from .Button import Button

__all__ = ["Button"]
