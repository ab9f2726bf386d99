#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2rawtext/nodes.py
"""Read-only view of BeautifulSoup trees used by the renderer.

The renderer never inspects BeautifulSoup objects directly. It asks this
module which kind of node it is looking at, for attribute values, for a
node's textual description and whether the node contributes any output.
"""

from __future__ import annotations

import enum
import html
import logging
from typing import Iterable

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PageElement, PreformattedString, Script, Stylesheet

from html2rawtext.constants import (
    BLOCK_ELEMENTS,
    TAG_ANCHOR,
    TAG_EMPHASIS,
    TAG_LINE_BREAK,
    TAG_LIST_ITEM,
    TAG_ORDERED_LIST,
    TAG_PARAGRAPH,
    TAG_SPAN,
    TAG_STRONG,
    TAG_UNORDERED_LIST,
)

logger = logging.getLogger(__name__)


class NodeKind(enum.Enum):
    """Closed set of node kinds the renderer has rules for.

    ``OTHER`` covers every tag without a rule of its own, the document object
    and non-text strings such as comments; those pass their children through.
    """

    SPAN = "span"
    PARAGRAPH = "paragraph"
    LINE_BREAK = "line_break"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    ANCHOR = "anchor"
    UNORDERED_LIST = "unordered_list"
    ORDERED_LIST = "ordered_list"
    LIST_ITEM = "list_item"
    TEXT = "text"
    OTHER = "other"


_TAG_KINDS = {
    TAG_SPAN: NodeKind.SPAN,
    TAG_PARAGRAPH: NodeKind.PARAGRAPH,
    TAG_LINE_BREAK: NodeKind.LINE_BREAK,
    TAG_EMPHASIS: NodeKind.EMPHASIS,
    TAG_STRONG: NodeKind.STRONG,
    TAG_ANCHOR: NodeKind.ANCHOR,
    TAG_UNORDERED_LIST: NodeKind.UNORDERED_LIST,
    TAG_ORDERED_LIST: NodeKind.ORDERED_LIST,
    TAG_LIST_ITEM: NodeKind.LIST_ITEM,
}

# Strings BeautifulSoup keeps as data rather than document text
_DATA_STRING_TYPES = (PreformattedString, Script, Stylesheet)


def is_element(node: PageElement) -> bool:
    """Return True for tags, excluding the document object itself."""
    return isinstance(node, Tag) and not isinstance(node, BeautifulSoup)


def classify_node(node: PageElement) -> NodeKind:
    """Return the kind of ``node``."""
    if is_element(node):
        return _TAG_KINDS.get(node.name.lower(), NodeKind.OTHER)
    if isinstance(node, NavigableString) and not isinstance(node, _DATA_STRING_TYPES):
        return NodeKind.TEXT
    return NodeKind.OTHER


def tag_name(node: PageElement) -> str | None:
    """Return the lower-cased tag name of an element, None for anything else."""
    if is_element(node):
        return node.name.lower()
    return None


def children_of(node: PageElement) -> list[PageElement]:
    """Return the ordered children of ``node``; strings have none."""
    if isinstance(node, Tag):
        return list(node.children)
    return []


def get_attribute(node: PageElement, name: str) -> str | None:
    """Look up an attribute value.

    Multi-valued attributes such as ``class`` come back joined with single
    spaces, as they appeared in the markup.

    Returns
    -------
    str or None
        The attribute value, or None when the node is not an element or the
        attribute is absent.

    """
    if not is_element(node):
        return None
    value = node.get(name)
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def decode_entities(text: str) -> str:
    """Decode HTML entities in ``text``."""
    return html.unescape(text)


def _is_block_element(node: PageElement | None) -> bool:
    return node is not None and is_element(node) and node.name.lower() in BLOCK_ELEMENTS


def _is_inter_block_whitespace(node: NavigableString) -> bool:
    if str(node).strip():
        return False
    return _is_block_element(node.previous_sibling) or _is_block_element(node.next_sibling)


def node_description(node: PageElement) -> str:
    """Return the textual description of ``node``.

    Text is serialized with minimal entity escaping, so it still carries
    entities to decode. Whitespace-only text next to a block-level sibling
    is source indentation and describes as the empty string. Comments and
    other markup strings describe as their markup, elements as their
    outer HTML.
    """
    if isinstance(node, NavigableString):
        if classify_node(node) is NodeKind.TEXT and _is_inter_block_whitespace(node):
            return ""
        return node.output_ready(formatter="minimal")
    return str(node)


def should_render(node: PageElement) -> bool:
    """Return True when ``node`` contributes output and so takes a sibling slot.

    Line breaks always render. Other elements render when their inner HTML is
    more than whitespace; if serializing it fails the outer description
    decides, and if that fails too the node is kept. Everything else renders
    when its description is non-empty.
    """
    if tag_name(node) == TAG_LINE_BREAK:
        return True

    if not is_element(node):
        return bool(node_description(node))

    try:
        return bool(node.decode_contents().strip())
    except Exception as e:
        logger.debug(f"Could not serialize contents of <{node.name}>, falling back to its description: {e}")

    try:
        return bool(node_description(node))
    except Exception as e:
        logger.debug(f"Could not describe <{node.name}>, keeping it: {e}")
        return True


def rendering_children(children: Iterable[PageElement]) -> list[PageElement]:
    """Return the children that pass ``should_render``, in order."""
    return [child for child in children if should_render(child)]
