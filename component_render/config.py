"""Configuration loader for component_render.

Reads environment variables (and a .env file via python-dotenv) that provide
defaults for renderers built without explicit arguments.
"""
from typing import Iterable, List, Optional
import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Settings:
    """Minimal settings holder.

    Values are read when the instance is created so tests can monkeypatch the
    environment before building a renderer.
    """

    def __init__(self) -> None:
        # Realistic translation mode: fallback chains, never raises on misses
        self.REALISTIC: bool = _flag("COMPONENT_RENDER_REALISTIC", "false")
        # Template file looked up inside each component directory
        self.COMPONENT_MACRO: str = os.getenv("COMPONENT_RENDER_MACRO", "macro.njk")
        self.LOG_LEVEL: str = os.getenv("COMPONENT_RENDER_LOG_LEVEL", "WARNING").upper()
        self.NORMALIZE_WHITESPACE: bool = _flag("COMPONENT_RENDER_NORMALIZE_WHITESPACE", "true")

    def validate_views(self, views: Optional[Iterable[str]]) -> List[str]:
        """Return the template directories that do not exist.

        Args:
            views: directories passed to the renderer.

        Returns:
            A list of missing directories (empty if all present).
        """
        missing: List[str] = []
        for view in views or []:
            if not os.path.isdir(view):
                missing.append(str(view))
        return missing
