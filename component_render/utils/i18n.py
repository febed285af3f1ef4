"""Translation resolution for rendered templates.

Two policies share one interface and are picked once per renderer:

- ``StrictResolver`` only looks at the first key, raises when a translation
  is missing, and shows ``[key]`` unless the render asked for real labels.
- ``RealisticResolver`` walks a list of candidate keys like a locale fallback
  chain and never raises; a miss falls back to the default, then the key.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Optional

from component_render.errors import TranslationNotFoundError
from component_render.utils.helpers import MISSING, as_key_list, get_path
from component_render.utils.logger import get_logger

logger = get_logger("component_render.i18n")


def is_ignored(key: str, ignore: Any) -> bool:
    if ignore is True:
        return True
    if not ignore:
        return False
    if isinstance(ignore, str):
        return key == ignore
    return key in ignore


def _options(options: Optional[Mapping]) -> Dict[str, Any]:
    opts = dict(options or {})
    if opts.get("optional") and "self" not in opts:
        opts["self"] = False
    opts.setdefault("self", True)
    return opts


class TranslationResolver:
    """Resolve translation keys against a locale dictionary.

    ``locale`` is ``None`` when the renderer was built without locale
    sources.
    """

    def __init__(self, locale: Optional[Mapping] = None):
        self.locale = locale

    def lookup(self, key: str) -> Any:
        """Return the value stored at ``key`` or ``MISSING``.

        Null leaves (``label:`` with no value in YAML) count as missing.
        """
        value = get_path(self.locale, key, MISSING)
        return MISSING if value is None else value

    def resolve(self, key, options: Optional[Mapping] = None, translate: bool = False, ignore: Any = None) -> Optional[str]:
        raise NotImplementedError


class StrictResolver(TranslationResolver):
    def resolve(self, key, options=None, translate=False, ignore=None):
        keys = as_key_list(key)
        key = keys[0] if keys else ""
        if self.locale is None:
            return f"[{key}]"
        opts = _options(options)

        value = self.lookup(key)
        if value is MISSING and opts.get("default") is not None:
            value = opts["default"]
        if value is MISSING:
            if opts["self"] and not is_ignored(key, ignore):
                raise TranslationNotFoundError(key)
            logger.debug("Missing translation %s suppressed", key)

        if not translate:
            return f"[{key}]"
        return None if value is MISSING else str(value)


class RealisticResolver(TranslationResolver):
    def resolve(self, key, options=None, translate=False, ignore=None):
        if self.locale is None:
            return None
        keys = as_key_list(key)
        opts = _options(options)

        for candidate in keys:
            value = self.lookup(candidate)
            if value is not MISSING:
                return value

        if opts.get("default") is not None:
            return opts["default"]
        if opts["self"] and keys:
            logger.debug("No translation for %s, showing the key", keys)
            return keys[0]
        return None


def make_resolver(locale: Optional[Mapping] = None, realistic: bool = False) -> TranslationResolver:
    if realistic:
        return RealisticResolver(locale)
    return StrictResolver(locale)
