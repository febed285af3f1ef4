"""Errors raised while loading locales or rendering templates."""
from __future__ import annotations


class ComponentRenderError(Exception):
    """Base class for every error raised by component_render."""


class LocaleLoadError(ComponentRenderError):
    """A locale file could not be parsed (or has an unsupported extension)."""

    def __init__(self, path, message: str):
        self.path = str(path)
        self.message = message
        super().__init__(f"Unable to load locale {self.path}: {message}")


class TranslationNotFoundError(ComponentRenderError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Translation not found for {key}")


class InvalidRequestError(ComponentRenderError):
    """Render options name none of template, string or component."""

    def __init__(self, message: str = "Cannot render!"):
        super().__init__(message)
