"""External process adapter."""

from .runner import AsyncioCommandRunner

__all__ = ["AsyncioCommandRunner"]
