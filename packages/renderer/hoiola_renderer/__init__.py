"""Renderer package for the terminal snapshot report."""

from .models import AnsiTheme
from .report import DEFAULT_TITLE, ReportRenderer
from .themes import DEFAULT_THEME_NAME, get_theme, list_themes

__all__ = [
    "AnsiTheme",
    "DEFAULT_THEME_NAME",
    "DEFAULT_TITLE",
    "ReportRenderer",
    "get_theme",
    "list_themes",
]
