from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    The tree renderer asks an exclusion rules object about every entry it lists.
    Rules are consulted with the bare entry name and its type, so an implementation
    can exclude a directory without excluding a file that happens to share its name.

    Example:
        >>> from directree.exclusion_rules.name_rules import NameExclusionRules
        >>> rules = NameExclusionRules(exclude_dirs=["build"])
        >>> rules.exclude("build", is_dir=True)
        True
        >>> rules.exclude("build", is_dir=False)
        False
    """

    @abstractmethod
    def exclude(self, name: str, is_dir: bool) -> bool:
        """
        Determine if an entry should be left out of the tree.

        Args:
            name (str): The entry's own name (no directory components).
            is_dir (bool): True if the entry is a directory, False otherwise.

        Returns:
            bool: True if the entry should be excluded, False if it should be shown.

        Example:
            >>> class NoHiddenRules(BaseExclusionRules):
            ...     def exclude(self, name: str, is_dir: bool) -> bool:
            ...         return name.startswith(".")
            >>> rules = NoHiddenRules()
            >>> rules.exclude(".env", is_dir=False)
            True
            >>> rules.exclude("src", is_dir=True)
            False
        """
        pass
