#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning plain-schema trees into text."""

from __future__ import annotations

from clausemark.renderers.base import BaseRenderer, InlineContentMixin
from clausemark.renderers.markdown import MarkdownRenderer

__all__ = ["BaseRenderer", "InlineContentMixin", "MarkdownRenderer"]
