"""Directory listing and tree rendering.

This package lists directory entries under fixed exclusion and ordering rules and
renders them as an indented text tree.
"""

from .directory_entry import DirectoryEntry, list_entries
from .render_options import RenderOptions
from .tree_renderer import TreeRenderer

__all__ = ["DirectoryEntry", "RenderOptions", "TreeRenderer", "list_entries"]
