"""Utility modules for Tabler.

Provides:
- text: escape_html, to_text for markup building
- logger: get_logger for logging
"""

from tabler.utils.logger import get_logger
from tabler.utils.text import escape_html, to_text

__all__ = [
    "escape_html",
    "get_logger",
    "to_text",
]
