"""Utility helpers for tasklist."""

from tasklist.utils.logging import setup_logging

__all__ = ["setup_logging"]
