#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2rawtext/options.py
"""Rendering options for html2rawtext.

Options are frozen dataclasses: one instance is passed unchanged through
every recursive call of a render. Callers used to bit-flag option sets can
build the same options from ``OptionFlag`` values.
"""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from html2rawtext.constants import (
    DEFAULT_KEEP_LINK_TEXT,
    DEFAULT_MASTODON,
    FLAG_KEEP_LINK_TEXT,
    FLAG_MASTODON,
)
from html2rawtext.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


class OptionFlag(enum.IntFlag):
    """Bit-flag form of ``RenderOptions``."""

    NONE = 0
    KEEP_LINK_TEXT = FLAG_KEEP_LINK_TEXT
    MASTODON = FLAG_MASTODON


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Options controlling how a tree is rendered to raw text.

    Parameters
    ----------
    keep_link_text : bool, default False
        Emit the text of ``<a>`` elements instead of their ``href``.
    mastodon : bool, default False
        Honor the ``invisible`` and ``ellipsis`` span classes that Mastodon
        uses to shorten links in statuses.

    Examples
    --------
        >>> RenderOptions(keep_link_text=True).create_updated(mastodon=True)
        RenderOptions(keep_link_text=True, mastodon=True)

    """

    keep_link_text: bool = field(
        default=DEFAULT_KEEP_LINK_TEXT,
        metadata={"help": "Copy link text instead of the link URL", "importance": "core"},
    )
    mastodon: bool = field(
        default=DEFAULT_MASTODON,
        metadata={"help": "Respect Mastodon 'invisible' and 'ellipsis' span classes", "importance": "core"},
    )

    @classmethod
    def from_flags(cls, flags: int) -> RenderOptions:
        """Build options from ``OptionFlag`` bits.

        Raises
        ------
        ValidationError
            If ``flags`` is negative or carries bits with no matching option.

        """
        known = OptionFlag.KEEP_LINK_TEXT | OptionFlag.MASTODON
        if flags < 0 or int(flags) & ~int(known):
            raise ValidationError(
                f"Unknown option flags: {flags!r}",
                parameter_name="flags",
                parameter_value=flags,
            )
        return cls(
            keep_link_text=bool(flags & OptionFlag.KEEP_LINK_TEXT),
            mastodon=bool(flags & OptionFlag.MASTODON),
        )

    @property
    def flags(self) -> OptionFlag:
        """The options as ``OptionFlag`` bits."""
        result = OptionFlag.NONE
        if self.keep_link_text:
            result |= OptionFlag.KEEP_LINK_TEXT
        if self.mastodon:
            result |= OptionFlag.MASTODON
        return result
