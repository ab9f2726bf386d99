#  Copyright (c) 2025 Tom Villani, Ph.D.
"""html2rawtext - Render parsed HTML trees to raw text.

html2rawtext turns a BeautifulSoup tree into a single plain-text string with
light markdown touches: paragraph and list spacing, ``*emphasis*`` and
``**strong**`` markers, bullet and numbered list items, and line breaks.
Links are replaced by their URL, or by their text on request, and the span
classes Mastodon uses to shorten links can be honored.

Examples
--------
Render an already-parsed tree:

    >>> from bs4 import BeautifulSoup
    >>> from html2rawtext import render_document
    >>> soup = BeautifulSoup("<ol><li>one</li><li>two</li></ol>", "html.parser")
    >>> print(render_document(soup))
    1. one
    2. two

Parse and render in one step:

    >>> from html2rawtext import RenderOptions, html_to_text
    >>> html_to_text('<a href="https://example.com">site</a>', RenderOptions(keep_link_text=True))
    'site'

"""

__version__ = "1.0.0"

from html2rawtext.api import html_to_text
from html2rawtext.context import RenderContext
from html2rawtext.exceptions import (
    FileError,
    Html2RawTextError,
    InvalidOptionsError,
    ParsingError,
    ValidationError,
)
from html2rawtext.nodes import NodeKind, should_render
from html2rawtext.options import OptionFlag, RenderOptions
from html2rawtext.renderer import RawTextRenderer, RenderedRun, render_document

__all__ = [
    "__version__",
    "html_to_text",
    "render_document",
    "RawTextRenderer",
    "RenderedRun",
    "RenderContext",
    "RenderOptions",
    "OptionFlag",
    "NodeKind",
    "should_render",
    "Html2RawTextError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "ParsingError",
]
