from typing import FrozenSet, Iterable

from .base_rules import BaseExclusionRules

DEFAULT_EXCLUDED_DIRS: FrozenSet[str] = frozenset({".git", "__pycache__", "node_modules", ".idea", ".vscode"})
DEFAULT_EXCLUDED_FILES: FrozenSet[str] = frozenset({".DS_Store", ".gitignore"})


class NameExclusionRules(BaseExclusionRules):
    """
    Exclusion rules based on exact entry names, scoped by entry type.

    The rules are the union of a built-in set of well-known tool and metadata names
    and any names supplied by the caller. Directory names and file names are kept
    in separate sets, so excluding ``build`` as a directory leaves a file named
    ``build`` visible. Both sets are frozen at construction time.

    Attributes:
        excluded_dirs (FrozenSet[str]): Directory names that are never shown.
        excluded_files (FrozenSet[str]): File names that are never shown.

    Example:
        >>> rules = NameExclusionRules(exclude_files=["Thumbs.db"])
        >>> rules.exclude(".git", is_dir=True)
        True
        >>> rules.exclude("Thumbs.db", is_dir=False)
        True
        >>> rules.exclude("Thumbs.db", is_dir=True)
        False
    """

    def __init__(self, exclude_dirs: Iterable[str] = (), exclude_files: Iterable[str] = ()) -> None:
        """
        Build the directory and file name sets.

        Args:
            exclude_dirs: Additional directory names to exclude. Duplicates collapse.
            exclude_files: Additional file names to exclude. Duplicates collapse.
        """
        self.excluded_dirs: FrozenSet[str] = DEFAULT_EXCLUDED_DIRS.union(exclude_dirs)
        self.excluded_files: FrozenSet[str] = DEFAULT_EXCLUDED_FILES.union(exclude_files)

    def exclude(self, name: str, is_dir: bool) -> bool:
        if is_dir:
            return name in self.excluded_dirs
        return name in self.excluded_files

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(excluded_dirs={sorted(self.excluded_dirs)!r}, "
            f"excluded_files={sorted(self.excluded_files)!r})"
        )
