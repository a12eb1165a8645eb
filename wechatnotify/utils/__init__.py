"""Utility modules for wechat-notify."""

from .logging import setup_logging
from .terminal import is_terminal, read_stdin

__all__ = ["setup_logging", "is_terminal", "read_stdin"]
