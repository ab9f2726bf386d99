#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for html2rawtext.

This module centralizes the tag names, marker strings and default values
used by the renderer, so the formatting rules can be read in one place.

Constants are organized by category:
1. Type Definitions
2. Markers and Separators
3. Tag Names
4. Options and Parsing Defaults
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ParserFeature = Literal["html.parser", "lxml", "html5lib"]

# =============================================================================
# Markers and Separators
# =============================================================================

EMPHASIS_MARKER = "*"
STRONG_MARKER = "**"
UNORDERED_LIST_MARKER = "• "
ORDERED_LIST_MARKER_TEMPLATE = "{ordinal}. "
ELLIPSIS = "…"

LINE_SEPARATOR = "\n"
LIST_SEPARATOR = "\n\n"

# Whitespace moved outside emphasis markers, and what gets stripped with it
CAPTURED_SPACE = " "
# Tab plus every Unicode space separator (Zs)
HORIZONTAL_WHITESPACE = "\t\u0020\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a\u202f\u205f\u3000"

# =============================================================================
# Tag Names
# =============================================================================

TAG_SPAN = "span"
TAG_PARAGRAPH = "p"
TAG_LINE_BREAK = "br"
TAG_EMPHASIS = "em"
TAG_STRONG = "strong"
TAG_ANCHOR = "a"
TAG_UNORDERED_LIST = "ul"
TAG_ORDERED_LIST = "ol"
TAG_LIST_ITEM = "li"

# Mastodon status markup
MASTODON_INVISIBLE_CLASS = "invisible"
MASTODON_ELLIPSIS_CLASS = "ellipsis"

# Whitespace-only text next to one of these is source indentation, not content
BLOCK_ELEMENTS = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "body",
        "dd",
        "details",
        "div",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "head",
        "header",
        "hr",
        "html",
        "li",
        "main",
        "nav",
        "ol",
        "p",
        "pre",
        "section",
        "summary",
        "table",
        "tbody",
        "td",
        "tfoot",
        "th",
        "thead",
        "title",
        "tr",
        "ul",
    }
)

# =============================================================================
# Options and Parsing Defaults
# =============================================================================

DEFAULT_KEEP_LINK_TEXT = False
DEFAULT_MASTODON = False

# Bit values of the flag form of the options
FLAG_KEEP_LINK_TEXT = 1 << 0
FLAG_MASTODON = 1 << 2

DEFAULT_PARSER: ParserFeature = "html.parser"
