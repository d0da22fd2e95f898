"""Textual host for the editor: display surface and application."""

from .surface import SurfaceHooks, TextualSurface, normalize_key

__all__ = ["SurfaceHooks", "TextualSurface", "normalize_key"]
