"""Utility functions."""

from .config import get_default_config, load_config
from .datetime_utils import format_duration, now_ms

__all__ = ['load_config', 'get_default_config', 'format_duration', 'now_ms']
