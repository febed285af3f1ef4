"""Render component templates in tests and compare the HTML as strings."""
from component_render.errors import (
    ComponentRenderError,
    InvalidRequestError,
    LocaleLoadError,
    TranslationNotFoundError,
)
from component_render.renderer import Renderer, renderer
from component_render.utils.html import clean_html, format_html, load_html
from component_render.utils.locales import load_locales

__all__ = [
    "ComponentRenderError",
    "InvalidRequestError",
    "LocaleLoadError",
    "TranslationNotFoundError",
    "Renderer",
    "renderer",
    "clean_html",
    "format_html",
    "load_html",
    "load_locales",
]
