"""Locale loader: read JSON/YAML translation files and merge them.

A locale source is either a single file or a directory of files. Files found
inside a directory are mounted at a path derived from their name, so
``fields.date.json`` contributes ``{"fields": {"date": {...}}}`` and
``default.json`` contributes its keys at the directory root. Sources are
deep-merged in order, later values winning, and the final dictionary is
frozen so renderers can share it without copying.
"""
from __future__ import annotations

import copy
import errno
import json
import os
import re
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Optional, Union

import yaml

from component_render.errors import LocaleLoadError
from component_render.utils.logger import get_logger

logger = get_logger("component_render.locales")

LOCALE_FILE = re.compile(r"\.(json|ya?ml)$")
DEFAULT_SEGMENT = "default"

PathLike = Union[str, os.PathLike]


def mount_path(filename: PathLike) -> List[str]:
    """Return the dictionary path a locale file mounts at.

    The extension is dropped and the remaining name split on dots; a trailing
    ``default`` segment is removed so the file mounts at its parent scope.
    """
    stem = LOCALE_FILE.sub("", os.path.basename(str(filename)))
    segments = [s for s in stem.split(".") if s]
    if segments and segments[-1] == DEFAULT_SEGMENT:
        segments = segments[:-1]
    return segments


def mount(segments: Iterable[str], value: Any) -> Any:
    """Wrap ``value`` in nested dicts, outermost key first."""
    for segment in reversed(list(segments)):
        value = {segment: value}
    return value


def deep_merge(*mappings: Optional[Mapping]) -> Dict[str, Any]:
    """Merge mappings left to right into a new dict.

    Nested mappings are merged recursively; anywhere else the later value
    replaces the earlier one outright. Inputs are never modified.
    """
    result: Dict[str, Any] = {}
    for mapping in mappings:
        if not mapping:
            continue
        for key, value in mapping.items():
            current = result.get(key)
            if isinstance(current, Mapping) and isinstance(value, Mapping):
                result[key] = deep_merge(current, value)
            elif isinstance(value, Mapping):
                result[key] = deep_merge(value)
            else:
                result[key] = copy.deepcopy(value)
    return result


def freeze(value: Any) -> Any:
    """Return a read-only view of nested mappings and lists."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of :func:`freeze`: plain, mutable dicts and lists."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    return value


def parse_file(path: PathLike) -> Mapping:
    """Parse one locale file into a mapping.

    Raises:
        LocaleLoadError: unknown extension, invalid content, or a top level
            that is not a mapping.
        OSError: the file cannot be read.
    """
    p = Path(path)
    suffix = p.suffix
    if suffix not in (".json", ".yml", ".yaml"):
        raise LocaleLoadError(p, f"unsupported locale file extension {suffix or '(none)'}")
    try:
        text = p.read_text(encoding="utf-8")
        if suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as e:
        raise LocaleLoadError(p, str(e)) from e
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise LocaleLoadError(p, f"expected a mapping at the top level, got {type(data).__name__}")
    return data


def load_directory(path: PathLike) -> Dict[str, Any]:
    """Load every locale file directly inside ``path``, in sorted order."""
    base = Path(path)
    merged: Dict[str, Any] = {}
    for name in sorted(os.listdir(base)):
        entry = base / name
        if not LOCALE_FILE.search(name) or not entry.is_file():
            logger.debug("Skipping %s", entry)
            continue
        merged = deep_merge(merged, mount(mount_path(name), parse_file(entry)))
    return merged


def load_source(path: PathLike) -> Mapping:
    """Load one locale source: a directory or a single file."""
    p = Path(path)
    if p.is_dir():
        return load_directory(p)
    if p.is_file():
        return parse_file(p)
    raise FileNotFoundError(errno.ENOENT, "Locale source not found", str(p))


def load_locales(sources: Union[PathLike, Iterable[PathLike]]) -> Mapping:
    """Load and deep-merge ``sources`` in order into a frozen dictionary.

    Any failure aborts the whole load; nothing partial is returned.
    """
    if isinstance(sources, (str, os.PathLike)):
        sources = [sources]
    sources = list(sources)
    merged: Dict[str, Any] = {}
    for source in sources:
        merged = deep_merge(merged, load_source(source))
    logger.debug("Loaded %d locale source(s), %d top-level key(s)", len(sources), len(merged))
    return freeze(merged)
