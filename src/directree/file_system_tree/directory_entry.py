"""Listing, filtering and ordering of a directory's immediate children."""

import os
from dataclasses import dataclass
from typing import List, Tuple

from directree.exclusion_rules.base_rules import BaseExclusionRules
from directree.types import PathType

PSEUDO_ENTRIES = (".", "..")


@dataclass(frozen=True)
class DirectoryEntry:
    """A named child of a listed directory.

    Attributes:
        name (str): The entry's name (no directory components).
        is_dir (bool): True if the entry is a directory. Symbolic links are never
            directories here, even when they point at one.

    Example:
        >>> DirectoryEntry("src", is_dir=True)
        DirectoryEntry(name='src', is_dir=True)
    """

    name: str
    is_dir: bool


def entry_sort_key(entry: DirectoryEntry) -> Tuple[bool, bytes]:
    """Sort key placing directories before files, then names in byte-wise order.

    Names are compared as their filesystem encoding, so ordering is case-sensitive
    and independent of locale and of the order the filesystem returned them in.

    Example:
        >>> entries = [DirectoryEntry("b.txt", False), DirectoryEntry("Z", True), DirectoryEntry("a", True)]
        >>> [e.name for e in sorted(entries, key=entry_sort_key)]
        ['Z', 'a', 'b.txt']
    """
    return (not entry.is_dir, os.fsencode(entry.name))


def sort_entries(entries: List[DirectoryEntry]) -> List[DirectoryEntry]:
    """Return the entries in tree order (see entry_sort_key)."""
    return sorted(entries, key=entry_sort_key)


def filter_entries(entries: List[DirectoryEntry], exclusion_rules: BaseExclusionRules) -> List[DirectoryEntry]:
    """Drop pseudo-entries and entries matched by the exclusion rules.

    Args:
        entries: Raw entries of one directory.
        exclusion_rules: Rules deciding which (name, type) pairs are hidden.

    Returns:
        The entries that should appear in the tree, in their original order.
    """
    return [
        entry
        for entry in entries
        if entry.name not in PSEUDO_ENTRIES and not exclusion_rules.exclude(entry.name, entry.is_dir)
    ]


def list_entries(path: PathType, exclusion_rules: BaseExclusionRules) -> List[DirectoryEntry]:
    """List the visible children of a directory in tree order.

    A directory that cannot be listed (permission denied, not a directory, removed
    while being traversed) is reported as having no children. The error is not
    propagated, so one inaccessible subtree never stops the rest of the traversal.

    Args:
        path: Directory to list.
        exclusion_rules: Rules deciding which entries are hidden.

    Returns:
        Filtered and sorted entries, or an empty list if the directory is unreadable.
    """
    try:
        with os.scandir(path) as it:
            raw = [DirectoryEntry(item.name, item.is_dir(follow_symlinks=False)) for item in it]
    except OSError:
        return []

    return sort_entries(filter_entries(raw, exclusion_rules))
