#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2rawtext/api.py
"""Convenience entry point from HTML markup to raw text.

The renderer works on trees that were already parsed. ``html_to_text``
parses markup with BeautifulSoup first, for callers that only have a string,
bytes, a file or a path.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Union

from bs4 import BeautifulSoup, FeatureNotFound

from html2rawtext.constants import DEFAULT_PARSER
from html2rawtext.exceptions import FileError, ParsingError, ValidationError
from html2rawtext.options import RenderOptions
from html2rawtext.renderer import RawTextRenderer

logger = logging.getLogger(__name__)

HtmlInput = Union[str, bytes, Path, IO[str], IO[bytes]]


def is_file_like(obj: Any) -> bool:
    """Return True when ``obj`` has a callable ``read``."""
    return callable(getattr(obj, "read", None))


def _read_markup(input_data: HtmlInput) -> str | bytes:
    if isinstance(input_data, (str, bytes)):
        logger.debug(f"Reading HTML from in-memory {type(input_data).__name__}")
        return input_data

    if isinstance(input_data, Path):
        logger.debug(f"Reading HTML file: {input_data}")
        try:
            return input_data.read_bytes()
        except OSError as e:
            raise FileError(f"Failed to read HTML file: {e}", file_path=str(input_data), original_error=e) from e

    if is_file_like(input_data):
        logger.debug("Reading HTML from file-like object")
        try:
            return input_data.read()
        except OSError as e:
            raise FileError(f"Failed to read HTML stream: {e}", original_error=e) from e

    raise ValidationError(
        f"Unsupported input type for HTML conversion: {type(input_data).__name__}",
        parameter_name="input_data",
        parameter_value=input_data,
    )


def html_to_text(
    input_data: HtmlInput,
    options: RenderOptions | None = None,
    parser: str = DEFAULT_PARSER,
) -> str:
    """Convert HTML to raw text.

    Parameters
    ----------
    input_data : str, bytes, pathlib.Path or file-like object
        HTML content to convert. Strings are markup, not paths; pass a
        ``pathlib.Path`` to read a file. Bytes are decoded by BeautifulSoup's
        encoding detection.
    options : RenderOptions or None, default None
        Rendering options. If None, uses default settings.
    parser : str, default "html.parser"
        BeautifulSoup tree builder feature, e.g. ``"lxml"``

    Returns
    -------
    str
        Raw text representation of the HTML

    Raises
    ------
    ValidationError
        If the input type is not supported
    InvalidOptionsError
        If ``options`` is not a RenderOptions instance
    FileError
        If the HTML file or stream cannot be read
    ParsingError
        If BeautifulSoup cannot build a tree

    Examples
    --------
        >>> html_to_text('<p>See <a href="https://example.com">this</a></p>')
        'See https://example.com'
        >>> html_to_text('<p>See <a href="https://example.com">this</a></p>',
        ...              options=RenderOptions(keep_link_text=True))
        'See this'

    """
    renderer = RawTextRenderer(options)
    markup = _read_markup(input_data)

    try:
        soup = BeautifulSoup(markup, parser)
    except FeatureNotFound as e:
        raise ParsingError(
            f"BeautifulSoup has no tree builder for parser '{parser}'", parsing_stage="parser_lookup", original_error=e
        ) from e
    except Exception as e:
        raise ParsingError(f"Failed to parse HTML: {e}", parsing_stage="html_parsing", original_error=e) from e

    logger.debug(f"Parsed HTML with {parser} ({len(markup)} {'bytes' if isinstance(markup, bytes) else 'chars'})")
    return renderer.render_document(soup)
