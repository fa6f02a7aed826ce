"""Synchronous event dispatching."""

from __future__ import annotations

from .dispatcher import EventDispatcher

__all__ = ["EventDispatcher"]
