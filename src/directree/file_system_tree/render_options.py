"""Immutable configuration for a tree rendering run."""

from dataclasses import dataclass, field
from typing import Optional

from directree.exclusion_rules.base_rules import BaseExclusionRules
from directree.exclusion_rules.name_rules import NameExclusionRules


@dataclass(frozen=True)
class RenderOptions:
    """Settings shared by every level of a rendering run.

    Attributes:
        max_depth: Deepest level whose entries are shown, counting the root's
            children as depth 0. None means unbounded.
        use_color: Wrap directory names in ANSI color sequences.
        exclusion_rules: Rules deciding which entries are hidden. Defaults to the
            built-in name sets.

    Example:
        >>> options = RenderOptions(max_depth=2)
        >>> options.max_depth, options.use_color
        (2, False)
    """

    max_depth: Optional[int] = None
    use_color: bool = False
    exclusion_rules: BaseExclusionRules = field(default_factory=NameExclusionRules)

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be None or a non-negative integer, got {self.max_depth}")

    def depth_exceeded(self, depth: int) -> bool:
        """Return True if entries at the given depth lie beyond max_depth."""
        return self.max_depth is not None and depth > self.max_depth
