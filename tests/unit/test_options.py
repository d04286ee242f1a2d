#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for option dataclasses."""
import dataclasses

import pytest

from clausemark.options import MarkdownRendererOptions, UnwrapOptions


@pytest.mark.unit
class TestUnwrapOptions:
    """Test rewrite options."""

    def test_defaults(self) -> None:
        """Test variables are wrapped by default."""
        assert UnwrapOptions().wrap_variables is True

    def test_create_updated(self) -> None:
        """Test deriving a modified copy."""
        original = UnwrapOptions()
        updated = original.create_updated(wrap_variables=False)

        assert updated.wrap_variables is False
        assert original.wrap_variables is True

    def test_frozen(self) -> None:
        """Test options cannot be mutated."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            UnwrapOptions().wrap_variables = False  # type: ignore[misc]

    def test_field_metadata(self) -> None:
        """Test fields carry help text."""
        (wrap_field,) = dataclasses.fields(UnwrapOptions)
        assert "help" in wrap_field.metadata


@pytest.mark.unit
class TestMarkdownRendererOptions:
    """Test markdown renderer options."""

    def test_defaults(self) -> None:
        """Test default values."""
        options = MarkdownRendererOptions()

        assert options.escape_special is True
        assert options.emphasis_symbol == "*"
        assert options.bullet_symbols == "*-+"
        assert options.code_fence_char == "`"
        assert options.code_fence_min == 3
        assert options.collapse_blank_lines is True

    @pytest.mark.parametrize("length", [0, 2, 11])
    def test_fence_length_range(self, length) -> None:
        """Test fence lengths outside 3..10 are rejected."""
        with pytest.raises(ValueError, match="code_fence_min"):
            MarkdownRendererOptions(code_fence_min=length)

    def test_empty_bullets_rejected(self) -> None:
        """Test at least one bullet symbol is required."""
        with pytest.raises(ValueError, match="bullet_symbols"):
            MarkdownRendererOptions(bullet_symbols="")

    def test_invalid_symbols_rejected(self) -> None:
        """Test unsupported emphasis and fence characters are rejected."""
        with pytest.raises(ValueError):
            MarkdownRendererOptions(emphasis_symbol="+")  # type: ignore[arg-type]
        with pytest.raises(ValueError):
            MarkdownRendererOptions(code_fence_char="'")  # type: ignore[arg-type]

    def test_create_updated_validates(self) -> None:
        """Test derived copies are validated too."""
        with pytest.raises(ValueError):
            MarkdownRendererOptions().create_updated(code_fence_min=1)
