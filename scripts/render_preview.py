"""Render one template and print it one element per line.

Usage: ``python scripts/render_preview.py page.html``. Template and locale
locations come from ``COMPONENT_RENDER_VIEWS`` and ``COMPONENT_RENDER_LOCALES``
(both ``os.pathsep`` separated). Labels are shown instead of ``[keys]`` and
missing translations are ignored so a half-translated page still renders.
"""
from __future__ import annotations

import os
import sys
from typing import List, Optional

from component_render import format_html, renderer


def _paths(value: Optional[str]) -> List[str]:
    return [p for p in (value or "").split(os.pathsep) if p]


def preview(template: str, views: List[str], locales: Optional[List[str]] = None) -> str:
    render = renderer(views, locales or None)
    doc = render({"template": template, "translate": True, "ignore": True})
    return format_html(doc.body)


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: render_preview.py <template>")
        raise SystemExit(2)
    views = _paths(os.getenv("COMPONENT_RENDER_VIEWS")) or [os.getcwd()]
    print(preview(sys.argv[1], views, _paths(os.getenv("COMPONENT_RENDER_LOCALES"))))
