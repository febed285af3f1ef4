"""Small helpers shared by the loader, translator and renderer."""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, List, Optional

MISSING = object()


def get_path(data: Any, key: Optional[str], default: Any = None) -> Any:
    """Look up ``key`` in nested mappings and lists.

    A literal key (``"a.b"`` stored as-is) takes precedence over the dotted
    path ``a`` -> ``b``; digit segments index into lists (``items.0.text``).
    Returns ``default`` when any segment is absent.
    """
    if key is None or not isinstance(data, Mapping):
        return default
    if key in data:
        return data[key]
    node = data
    for part in str(key).split("."):
        if isinstance(node, Mapping):
            if part not in node:
                return default
            node = node[part]
        elif isinstance(node, (list, tuple)) and part.isdigit() and int(part) < len(node):
            node = node[int(part)]
        else:
            return default
    return node


def as_key_list(key: Any) -> List[str]:
    """Normalise a translation key (string or list of strings) to a list."""
    if key is None:
        return []
    if isinstance(key, (list, tuple)):
        return [str(k) for k in key]
    return [str(key)]


def component_filename(component: str, macro: str = "macro.njk") -> str:
    """Map a macro name to its template, e.g. ``testComponent`` -> ``test-component/macro.njk``."""
    folder = re.sub(r"([A-Z])", lambda m: "-" + m.group(1).lower(), component)
    return f"{folder}/{macro}"
