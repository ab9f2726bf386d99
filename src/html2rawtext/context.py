#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2rawtext/context.py
"""Structural context of a node among its rendering siblings.

A context is computed fresh for every child at every level of the render and
is only ever handed one level down. List handlers inject the list kind into
the context of their own children; nothing else is inherited.
"""

from __future__ import annotations

from dataclasses import dataclass

from html2rawtext.options import CloneFrozenMixin


@dataclass(frozen=True)
class RenderContext(CloneFrozenMixin):
    """Position facts for one node.

    Parameters
    ----------
    is_first_child : bool, default False
        The node is the first rendering child of its parent.
    is_final_child : bool, default False
        The node is the last rendering child of its parent.
    is_single_child_in_root : bool, default False
        The node is the only rendering child of the document root.
    is_unordered_list : bool, default False
        The parent is a ``<ul>``.
    is_ordered_list : bool, default False
        The parent is an ``<ol>``.

    """

    is_first_child: bool = False
    is_final_child: bool = False
    is_single_child_in_root: bool = False
    is_unordered_list: bool = False
    is_ordered_list: bool = False

    @classmethod
    def unordered_list(cls) -> RenderContext:
        """Context handed to the children of a ``<ul>``."""
        return cls(is_unordered_list=True)

    @classmethod
    def ordered_list(cls) -> RenderContext:
        """Context handed to the children of an ``<ol>``."""
        return cls(is_ordered_list=True)

    def for_position(self, index: int, count: int) -> RenderContext:
        """Return this context with the first/final flags of ``index`` among ``count`` siblings set."""
        return self.create_updated(
            is_first_child=self.is_first_child or index == 0,
            is_final_child=self.is_final_child or index == count - 1,
        )

    @property
    def is_block_edge_start(self) -> bool:
        """No separator is needed before the node."""
        return self.is_single_child_in_root or self.is_first_child

    @property
    def is_block_edge_end(self) -> bool:
        """No separator is needed after the node."""
        return self.is_single_child_in_root or self.is_final_child
