#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2rawtext/renderer.py
"""Raw text rendering of parsed HTML trees.

This module provides the RawTextRenderer class which walks a BeautifulSoup
tree depth-first and produces a single plain-text string with light
markdown touches: emphasis markers, list markers, and paragraph and list
spacing. Each node is rendered from its kind, the options, and its context:
its position among the siblings that actually produce output.

Formatting Rules
----------------
- ``<p>``: separated from its siblings by a newline on each side
- ``<br>``: a newline, unless it is the last thing in its parent
- ``<em>`` / ``<strong>``: ``*text*`` / ``**text**``, with boundary spaces
  moved outside of the markers
- ``<a>``: the ``href``, or the link text with ``keep_link_text``
- ``<ul>`` / ``<ol>``: separated by a blank line, items marked ``•`` or ``1.``
- ``<span>``: Mastodon ``invisible`` and ``ellipsis`` classes with ``mastodon``
- anything else: its children, unchanged

Examples
--------
    >>> from bs4 import BeautifulSoup
    >>> soup = BeautifulSoup("<p>Hello <em>there </em></p><p>Bye</p>", "html.parser")
    >>> print(render_document(soup))
    Hello *there*
    <BLANKLINE>
    Bye

"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, NamedTuple

from bs4.element import PageElement

from html2rawtext.constants import (
    CAPTURED_SPACE,
    ELLIPSIS,
    EMPHASIS_MARKER,
    HORIZONTAL_WHITESPACE,
    LINE_SEPARATOR,
    LIST_SEPARATOR,
    MASTODON_ELLIPSIS_CLASS,
    MASTODON_INVISIBLE_CLASS,
    ORDERED_LIST_MARKER_TEMPLATE,
    STRONG_MARKER,
    UNORDERED_LIST_MARKER,
)
from html2rawtext.context import RenderContext
from html2rawtext.exceptions import InvalidOptionsError
from html2rawtext.nodes import (
    NodeKind,
    children_of,
    classify_node,
    decode_entities,
    get_attribute,
    node_description,
    rendering_children,
    tag_name,
)
from html2rawtext.options import RenderOptions

logger = logging.getLogger(__name__)

NodeHandler = Callable[[PageElement, RenderContext, int], str]


class RenderedRun(NamedTuple):
    """Concatenated output of a node's children.

    ``leading_space`` and ``trailing_space`` report boundary spaces that were
    removed from ``body`` so the caller can put them back outside its own
    markup. They are only ever set when the children were rendered with
    ``capture_spaces``.
    """

    body: str
    leading_space: bool = False
    trailing_space: bool = False

    def wrap(self, marker: str) -> str:
        """Return ``body`` between two ``marker`` strings, captured spaces outside."""
        prefix = CAPTURED_SPACE if self.leading_space else ""
        postfix = CAPTURED_SPACE if self.trailing_space else ""
        return f"{prefix}{marker}{self.body}{marker}{postfix}"


class RawTextRenderer:
    """Render BeautifulSoup trees to raw text.

    The renderer keeps no state between calls; one instance may render any
    number of trees.

    Parameters
    ----------
    options : RenderOptions or None, default = None
        Rendering options

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a RenderOptions instance

    """

    def __init__(self, options: RenderOptions | None = None):
        """Initialize the renderer with options."""
        self._validate_options_type(options, RenderOptions, "raw text renderer")
        self.options: RenderOptions = options or RenderOptions()
        self._handlers: dict[NodeKind, NodeHandler] = {
            NodeKind.SPAN: self._render_span,
            NodeKind.PARAGRAPH: self._render_paragraph,
            NodeKind.LINE_BREAK: self._render_line_break,
            NodeKind.EMPHASIS: self._render_emphasis,
            NodeKind.STRONG: self._render_strong,
            NodeKind.ANCHOR: self._render_anchor,
            NodeKind.UNORDERED_LIST: self._render_unordered_list,
            NodeKind.ORDERED_LIST: self._render_ordered_list,
            NodeKind.LIST_ITEM: self._render_list_item,
            NodeKind.TEXT: self._render_text,
            NodeKind.OTHER: self._render_other,
        }

    @staticmethod
    def _validate_options_type(options: object, expected_type: type, renderer_name: str) -> None:
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    def render_document(self, root: PageElement) -> str:
        """Render a whole document.

        The root is an implicit container: its rendering children get the
        usual first/final context, plus ``is_single_child_in_root`` when
        there is only one of them. The result is stripped of surrounding
        whitespace.

        Parameters
        ----------
        root : PageElement
            A BeautifulSoup object or any tag

        Returns
        -------
        str
            The rendered text

        """
        nodes = rendering_children(children_of(root))
        root_context = RenderContext(is_single_child_in_root=len(nodes) == 1)
        parts = [
            self.render_node(child, root_context.for_position(index, len(nodes)), index)
            for index, child in enumerate(nodes)
        ]
        return "".join(parts).strip()

    def render_children(
        self,
        children: Iterable[PageElement],
        context: RenderContext | None = None,
        capture_spaces: bool = False,
    ) -> RenderedRun:
        """Render the rendering subset of ``children`` and concatenate the results.

        Parameters
        ----------
        children : iterable of PageElement
            Children of one node, in document order
        context : RenderContext or None, default = None
            List flags to hand to every child; first/final flags are added
            per child
        capture_spaces : bool, default = False
            Move a leading or trailing space out of the body and report it
            on the returned run instead

        Returns
        -------
        RenderedRun
            The entity-decoded body and any captured spaces

        """
        if context is None:
            context = RenderContext()

        nodes = rendering_children(children)
        body = "".join(
            self.render_node(child, context.for_position(index, len(nodes)), index)
            for index, child in enumerate(nodes)
        )

        leading_space = trailing_space = False
        if capture_spaces:
            leading_space = body.startswith(CAPTURED_SPACE)
            trailing_space = body.endswith(CAPTURED_SPACE)
            if leading_space or trailing_space:
                body = body.strip(HORIZONTAL_WHITESPACE)

        return RenderedRun(decode_entities(body), leading_space, trailing_space)

    def render_node(self, node: PageElement, context: RenderContext, index: int) -> str:
        """Render one node.

        Parameters
        ----------
        node : PageElement
            The node to render
        context : RenderContext
            The node's position among its rendering siblings
        index : int
            Zero-based index among the rendering siblings, used as list ordinal

        """
        return self._handlers[classify_node(node)](node, context, index)

    def _children_text(self, node: PageElement, context: RenderContext | None = None) -> str:
        return self.render_children(children_of(node), context).body

    def _render_span(self, node: PageElement, context: RenderContext, index: int) -> str:
        class_attr = get_attribute(node, "class")
        if class_attr is None or not self.options.mastodon:
            return self._children_text(node)

        classes = class_attr.split()
        if MASTODON_INVISIBLE_CLASS in classes:
            return ""

        text = self._children_text(node)
        if MASTODON_ELLIPSIS_CLASS in classes:
            text += ELLIPSIS
        return text

    def _render_paragraph(self, node: PageElement, context: RenderContext, index: int) -> str:
        leading = "" if context.is_block_edge_start else LINE_SEPARATOR
        trailing = "" if context.is_block_edge_end else LINE_SEPARATOR
        return f"{leading}{self._children_text(node).strip()}{trailing}"

    def _render_line_break(self, node: PageElement, context: RenderContext, index: int) -> str:
        # Leading whitespace of the text after the break is kept
        return "" if context.is_final_child else LINE_SEPARATOR

    def _render_emphasis(self, node: PageElement, context: RenderContext, index: int) -> str:
        return self.render_children(children_of(node), capture_spaces=True).wrap(EMPHASIS_MARKER)

    def _render_strong(self, node: PageElement, context: RenderContext, index: int) -> str:
        return self.render_children(children_of(node), capture_spaces=True).wrap(STRONG_MARKER)

    def _render_anchor(self, node: PageElement, context: RenderContext, index: int) -> str:
        href = get_attribute(node, "href")
        if href is None or self.options.keep_link_text:
            return self._children_text(node)
        return href

    def _render_list(self, node: PageElement, context: RenderContext, list_context: RenderContext) -> str:
        leading = "" if context.is_first_child else LIST_SEPARATOR
        trailing = "" if context.is_final_child else LIST_SEPARATOR
        return f"{leading}{self._children_text(node, list_context)}{trailing}"

    def _render_unordered_list(self, node: PageElement, context: RenderContext, index: int) -> str:
        return self._render_list(node, context, RenderContext.unordered_list())

    def _render_ordered_list(self, node: PageElement, context: RenderContext, index: int) -> str:
        return self._render_list(node, context, RenderContext.ordered_list())

    def _render_list_item(self, node: PageElement, context: RenderContext, index: int) -> str:
        if context.is_unordered_list:
            marker = UNORDERED_LIST_MARKER
        elif context.is_ordered_list:
            marker = ORDERED_LIST_MARKER_TEMPLATE.format(ordinal=index + 1)
        else:
            logger.debug("List item outside of a list, rendering it without a marker")
            marker = ""

        trailing = "" if context.is_final_child else LINE_SEPARATOR
        return f"{marker}{self._children_text(node)}{trailing}"

    def _render_text(self, node: PageElement, context: RenderContext, index: int) -> str:
        return decode_entities(node_description(node))

    def _render_other(self, node: PageElement, context: RenderContext, index: int) -> str:
        name = tag_name(node)
        if name is not None:
            logger.debug(f"Passing through children of <{name}>")
        return self._children_text(node)


def render_document(root: PageElement, options: RenderOptions | None = None) -> str:
    """Render a parsed HTML tree to raw text.

    Parameters
    ----------
    root : PageElement
        Root of a BeautifulSoup tree, usually the ``BeautifulSoup`` object
    options : RenderOptions or None, default None
        Rendering options. If None, uses default settings.

    Returns
    -------
    str
        Raw text with surrounding whitespace removed

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a RenderOptions instance

    """
    return RawTextRenderer(options).render_document(root)
