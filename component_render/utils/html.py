"""Parse rendered HTML and normalise it for string comparison.

``clean_html`` produces single-line HTML, ``format_html`` puts one element
per line. Both take a whole document, a single tag (its inner HTML is used)
or a plain string.
"""
from __future__ import annotations

import re
from typing import Union

from bs4 import BeautifulSoup, NavigableString, Tag

RIGHT_QUOTE_ENTITY = "&#x2019;"
RIGHT_QUOTE = "’"

_OPEN_TAG = re.compile(r"(<[^/][^>]+>)\s*")
_CLOSE_TAG = re.compile(r"\s*(</[^>]+>)")
_NEWLINES = re.compile(r"(\n\s*)+")
_WHITESPACE = re.compile(r"\s+")

Node = Union[BeautifulSoup, Tag, str]


def load_html(html: str, normalize_whitespace: bool = True) -> BeautifulSoup:
    """Parse ``html`` into a document that always has ``head`` and ``body``.

    Fragments are moved into a fresh ``<html><head></head><body>`` shell.
    With ``normalize_whitespace`` every run of whitespace in a text node
    becomes a single space.
    """
    soup = BeautifulSoup(html, "html.parser")
    if soup.body is None:
        doc = BeautifulSoup("<html><head></head><body></body></html>", "html.parser")
        for node in list(soup.contents):
            doc.body.append(node.extract())
        soup = doc
    if normalize_whitespace:
        for text in soup.find_all(string=True):
            # exact type check leaves comments, doctypes and CDATA alone
            if type(text) is NavigableString:
                text.replace_with(_WHITESPACE.sub(" ", str(text)))
    return soup


def _markup(node: Node) -> str:
    if isinstance(node, BeautifulSoup):
        return str(node)
    if isinstance(node, Tag):
        return node.decode_contents()
    return str(node)


def format_html(node: Node) -> str:
    html = _markup(node).replace(RIGHT_QUOTE_ENTITY, RIGHT_QUOTE)
    html = _OPEN_TAG.sub(r"\n\1", html)
    html = _CLOSE_TAG.sub(r"\1\n", html)
    html = _NEWLINES.sub("\n", html)
    return html.strip()


def clean_html(node: Node) -> str:
    html = _markup(node).replace(RIGHT_QUOTE_ENTITY, RIGHT_QUOTE)
    html = _OPEN_TAG.sub(r"\1", html)
    html = _CLOSE_TAG.sub(r"\1", html)
    html = _NEWLINES.sub("", html)
    return html.strip()
