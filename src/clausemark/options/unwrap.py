#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clausemark/options/unwrap.py
"""Options for the annotated to plain rewrite."""

from __future__ import annotations

from dataclasses import dataclass, field

from clausemark.constants import DEFAULT_WRAP_VARIABLES
from clausemark.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class UnwrapOptions(CloneFrozenMixin):
    """Configuration for ``UnwrapTransformer``.

    Parameters
    ----------
    wrap_variables : bool, default True
        When True, bound variables become self-closing synthetic tags
        (``<variable id="x" value="..."/>``). When False, their literal text
        is the bound value itself, or ``{{value}}`` for computed variables.

    """

    wrap_variables: bool = field(
        default=DEFAULT_WRAP_VARIABLES,
        metadata={
            "help": "Render bound variables as synthetic tags instead of their raw values",
            "importance": "core",
        },
    )
