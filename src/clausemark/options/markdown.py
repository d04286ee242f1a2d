#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown rendering."""
# src/clausemark/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from clausemark.constants import (
    DEFAULT_BULLET_SYMBOLS,
    DEFAULT_CODE_FENCE_CHAR,
    DEFAULT_CODE_FENCE_MIN,
    DEFAULT_COLLAPSE_BLANK_LINES,
    DEFAULT_EMPHASIS_SYMBOL,
    DEFAULT_ESCAPE_SPECIAL,
    MAX_CODE_FENCE_LENGTH,
    MIN_CODE_FENCE_LENGTH,
    CodeFenceChar,
    EmphasisSymbol,
)
from clausemark.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    r"""Markdown rendering options for converting a plain tree to Markdown text.

    Parameters
    ----------
    escape_special : bool, default True
        Whether to escape special Markdown characters in text content.
        When True, characters like \*, \_, #, [, ], \\ are escaped
        to prevent unintended formatting.
    emphasis_symbol : {"\*", "\_"}, default "\*"
        Symbol to use for emphasis/italic formatting in Markdown.
    bullet_symbols : str, default "\*-+"
        Characters to cycle through for nested bullet lists.
    code_fence_char : {"`", "~"}, default "`"
        Character to use for code fences (backtick or tilde).
    code_fence_min : int, default 3
        Minimum length for code fences (3 to 10).
    collapse_blank_lines : bool, default True
        Drop empty blocks so blank lines between blocks never pile up.

    """

    escape_special: bool = field(
        default=DEFAULT_ESCAPE_SPECIAL,
        metadata={
            "help": "Escape special Markdown characters (e.g. asterisks) in text content",
            "importance": "core",
        },
    )
    emphasis_symbol: EmphasisSymbol = field(
        default=DEFAULT_EMPHASIS_SYMBOL,  # type: ignore[arg-type]
        metadata={"help": "Symbol to use for emphasis/italic formatting", "choices": ["*", "_"], "importance": "core"},
    )
    bullet_symbols: str = field(
        default=DEFAULT_BULLET_SYMBOLS,
        metadata={"help": "Characters to cycle through for nested bullet lists", "importance": "advanced"},
    )
    code_fence_char: CodeFenceChar = field(
        default=DEFAULT_CODE_FENCE_CHAR,  # type: ignore[arg-type]
        metadata={"help": "Character to use for code fences", "choices": ["`", "~"], "importance": "advanced"},
    )
    code_fence_min: int = field(
        default=DEFAULT_CODE_FENCE_MIN,
        metadata={"help": "Minimum length for code fences", "type": int, "importance": "advanced"},
    )
    collapse_blank_lines: bool = field(
        default=DEFAULT_COLLAPSE_BLANK_LINES,
        metadata={"help": "Drop empty blocks so blank lines between blocks never pile up", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and symbol sets.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if not MIN_CODE_FENCE_LENGTH <= self.code_fence_min <= MAX_CODE_FENCE_LENGTH:
            raise ValueError(
                f"code_fence_min must be between {MIN_CODE_FENCE_LENGTH} and {MAX_CODE_FENCE_LENGTH}, "
                f"got {self.code_fence_min}"
            )

        if not self.bullet_symbols:
            raise ValueError("bullet_symbols must contain at least one character")

        if self.emphasis_symbol not in ("*", "_"):
            raise ValueError(f"emphasis_symbol must be '*' or '_', got {self.emphasis_symbol!r}")

        if self.code_fence_char not in ("`", "~"):
            raise ValueError(f"code_fence_char must be '`' or '~', got {self.code_fence_char!r}")
