"""Default globals and filters registered on every renderer environment.

Component libraries usually ship their own ``add_globals``/``add_filters``
hooks; these are used when a renderer is built without them.
"""
from __future__ import annotations

import json
from typing import Any

from jinja2 import Environment


def dump(value: Any, indent: Any = None) -> str:
    """Serialise ``value`` as JSON; compact unless ``indent`` is given."""
    if indent is None:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    return json.dumps(value, indent=indent, ensure_ascii=False, default=str)


def add_globals(env: Environment) -> None:
    env.globals["json_dumps"] = dump


def add_filters(env: Environment) -> None:
    env.filters["dump"] = dump
