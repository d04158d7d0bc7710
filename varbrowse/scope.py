"""
Nesting depth bookkeeping for a single render call.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass
class RenderContext:
    """
    Current nesting level of one top-level render call.

    A new context is created for every top-level call and passed explicitly
    down the recursion, so independent calls never share depth.

    Attributes:
        depth: Current nesting level, >= 0.
        indent: Whitespace units per nesting level.

    Examples:
        >>> ctx = RenderContext()
        >>> with ctx.scope():
        ...     ctx.indent_width()
        2
        >>> ctx.depth
        0
    """
    depth: int = 0
    indent: int = 2

    def __post_init__(self) -> None:
        for name in ("depth", "indent"):
            val = getattr(self, name)
            if isinstance(val, bool) or not isinstance(val, int):
                raise TypeError(f"RenderContext.{name} must be an int, got {fmt_type(val)}")
            if val < 0:
                raise ValueError(f"RenderContext.{name} must be >=0, but got {val}")

    def enter(self) -> None:
        """Descend one nesting level."""
        self.depth += 1

    def leave(self) -> None:
        """Ascend one nesting level."""
        if self.depth == 0:
            raise ValueError("RenderContext.leave() called at depth 0, enter/leave calls are unbalanced")
        self.depth -= 1

    def indent_width(self) -> int:
        """Number of whitespace units at the current depth."""
        return self.indent * self.depth

    @contextmanager
    def scope(self) -> Iterator["RenderContext"]:
        """
        Bracket a descent into composite children with enter() and leave().

        Depth is restored even if the body raises.
        """
        self.enter()
        try:
            yield self
        finally:
            self.leave()
