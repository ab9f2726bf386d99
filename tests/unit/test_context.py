"""Tests for RenderContext position and list flags."""

import pytest

from html2rawtext import RenderContext


@pytest.mark.unit
class TestRenderContext:
    """Test derivation of per-child contexts."""

    def test_empty_context(self):
        """A fresh context carries no facts."""
        context = RenderContext()
        assert not any(
            [
                context.is_first_child,
                context.is_final_child,
                context.is_single_child_in_root,
                context.is_unordered_list,
                context.is_ordered_list,
            ]
        )

    def test_single_position_is_first_and_final(self):
        """The only child is both first and final."""
        context = RenderContext().for_position(0, 1)
        assert context.is_first_child
        assert context.is_final_child

    def test_middle_position(self):
        """A middle child is neither first nor final."""
        context = RenderContext().for_position(1, 3)
        assert not context.is_first_child
        assert not context.is_final_child

    def test_list_flag_preserved(self):
        """List flags handed in survive position derivation."""
        context = RenderContext.ordered_list().for_position(2, 3)
        assert context.is_ordered_list
        assert not context.is_unordered_list
        assert context.is_final_child
        assert not context.is_first_child

        assert RenderContext.unordered_list().for_position(0, 2).is_unordered_list

    def test_for_position_does_not_mutate(self):
        """Derivation returns a new context."""
        base = RenderContext.unordered_list()
        base.for_position(0, 1)
        assert not base.is_first_child

    def test_block_edges(self):
        """Sole root children sit on both block edges."""
        sole = RenderContext(is_single_child_in_root=True)
        assert sole.is_block_edge_start
        assert sole.is_block_edge_end

        first = RenderContext().for_position(0, 2)
        assert first.is_block_edge_start
        assert not first.is_block_edge_end
