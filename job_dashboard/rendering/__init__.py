"""Rendering of search results for terminal or JSON output."""

from .renderer import DISPLAY_FIELDS, RenderingError, ResultsRenderer

__all__ = ["DISPLAY_FIELDS", "RenderingError", "ResultsRenderer"]
