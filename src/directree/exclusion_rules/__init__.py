"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .name_rules import DEFAULT_EXCLUDED_DIRS, DEFAULT_EXCLUDED_FILES, NameExclusionRules

__all__ = [
    "BaseExclusionRules",
    "DEFAULT_EXCLUDED_DIRS",
    "DEFAULT_EXCLUDED_FILES",
    "NameExclusionRules",
]
