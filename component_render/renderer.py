"""Render templates, strings and component macros for tests.

Typical use::

    render = renderer(["views"], ["locales/en"])
    doc = render({"component": "hmpoButton", "params": {"text": "Go"}})
    assert clean_html(doc.body) == '<button>[buttons.go]</button>'

Every render gets two context functions: ``translate`` (backed by the
renderer's translation resolver) and ``ctx`` (the whole context, or one
value by dotted path). The output is parsed into a BeautifulSoup document.
"""
from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Optional, Union

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader

from component_render import filters as default_filters
from component_render.config import Settings
from component_render.errors import InvalidRequestError
from component_render.utils.helpers import MISSING, component_filename, get_path
from component_render.utils.html import load_html
from component_render.utils.i18n import TranslationResolver, make_resolver
from component_render.utils.locales import load_locales
from component_render.utils.logger import get_logger

logger = get_logger("component_render.renderer")

Hook = Callable[[Environment], None]
Paths = Union[str, os.PathLike, Iterable[Union[str, os.PathLike]]]

PARAMS_VAR = "_component_params"


def _as_list(paths: Optional[Paths]) -> list:
    if paths is None:
        return []
    if isinstance(paths, (str, os.PathLike)):
        return [str(paths)]
    return [str(p) for p in paths]


class Renderer:
    """Callable that renders one template, string or component per call."""

    def __init__(
        self,
        views: Paths,
        locales: Optional[Paths] = None,
        add_globals: Optional[Hook] = None,
        add_filters: Optional[Hook] = None,
        realistic: Optional[bool] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or Settings()
        get_logger(level=self.settings.LOG_LEVEL)
        self.views = _as_list(views)
        for missing in self.settings.validate_views(self.views):
            logger.warning("Template directory %s does not exist", missing)

        self.env = Environment(
            loader=FileSystemLoader(self.views),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        (add_globals or default_filters.add_globals)(self.env)
        (add_filters or default_filters.add_filters)(self.env)

        sources = _as_list(locales)
        self.dictionary: Optional[Mapping] = load_locales(sources) if sources else None

        self.realistic = self.settings.REALISTIC if realistic is None else bool(realistic)
        self.resolver: TranslationResolver = make_resolver(self.dictionary, self.realistic)

    def _context(self, options: Mapping, context: Optional[Mapping]) -> Dict[str, Any]:
        resolver = self.resolver
        display = bool(options.get("translate"))
        ignore = options.get("ignore")

        def translate(key, translate_options=None, **kwargs):
            opts = dict(translate_options or {})
            opts.update(kwargs)
            value = resolver.resolve(key, opts, translate=display, ignore=ignore)
            return "" if value is None else value

        def ctx(key=None):
            if not key:
                return full
            value = get_path(full, key, MISSING)
            # missing paths render as nothing and stay falsy in templates
            return self.env.undefined(name=key) if value is MISSING else value

        full: Dict[str, Any] = {"translate": translate, "ctx": ctx}
        full.update(context or {})
        return full

    def _component_source(self, options: Mapping) -> str:
        name = options["component"]
        filename = component_filename(name, self.settings.COMPONENT_MACRO)
        args = []
        if options.get("ctx"):
            args.append("ctx")
        if options.get("params") is not None:
            args.append(PARAMS_VAR)
        call = f"{name}({', '.join(args)})"
        source = f'{{% from "{filename}" import {name} with context %}}'
        if options.get("caller") is not None:
            return source + f"{{% call {call} %}}{options['caller']}{{% endcall %}}"
        return source + f"{{{{ {call} }}}}"

    def __call__(self, options: Union[str, Mapping], context: Optional[Mapping] = None, **kwargs) -> BeautifulSoup:
        if isinstance(options, str):
            options = {"template": options}
        options = dict(options or {}, **kwargs)
        context = self._context(options, context)

        if options.get("template"):
            logger.debug("Rendering template %s", options["template"])
            output = self.env.get_template(options["template"]).render(context)
        elif options.get("string"):
            logger.debug("Rendering string")
            output = self.env.from_string(options["string"]).render(context)
        elif options.get("component"):
            logger.debug("Rendering component %s", options["component"])
            source = self._component_source(options)
            output = self.env.from_string(source).render({**context, PARAMS_VAR: options.get("params")})
        else:
            raise InvalidRequestError()

        return load_html(output, normalize_whitespace=self.settings.NORMALIZE_WHITESPACE)


def renderer(
    views: Paths,
    locales: Optional[Paths] = None,
    add_globals: Optional[Hook] = None,
    add_filters: Optional[Hook] = None,
    realistic: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> Renderer:
    return Renderer(views, locales, add_globals, add_filters, realistic, settings)
