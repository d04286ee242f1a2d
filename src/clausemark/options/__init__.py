#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for clausemark.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy instead of mutating an instance.
"""

from __future__ import annotations

from clausemark.options.base import BaseRendererOptions, CloneFrozenMixin
from clausemark.options.markdown import MarkdownRendererOptions
from clausemark.options.unwrap import UnwrapOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownRendererOptions",
    "UnwrapOptions",
]
