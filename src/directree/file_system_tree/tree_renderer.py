"""Text rendering of directory trees.

This module provides the TreeRenderer class, which walks a directory depth-first
and produces one line per visible entry, using box-drawing connectors to show
nesting and which entry closes each sibling group.
"""

from pathlib import Path
from typing import Iterator, Optional

from directree.file_system_tree.directory_entry import DirectoryEntry, list_entries
from directree.file_system_tree.render_options import RenderOptions
from directree.types import PathType

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_INDENT = "│   "
SPACE_INDENT = "    "

COLOR_DIRECTORY = "\033[0;34m"
COLOR_RESET = "\033[0m"


def format_entry(entry: DirectoryEntry, prefix: str, is_last: bool, use_color: bool = False) -> str:
    """Format the line for a single entry.

    Args:
        entry: The entry to format.
        prefix: Continuation segments inherited from the entry's ancestors.
        is_last: Whether the entry is the last of its sibling group.
        use_color: Whether to color directory names.

    Returns:
        ``prefix + connector + name`` followed by a newline.

    Example:
        >>> format_entry(DirectoryEntry("x.txt", False), "│   ", is_last=True)
        '│   └── x.txt\\n'
    """
    connector = LAST_BRANCH if is_last else BRANCH
    name = entry.name
    if entry.is_dir and use_color:
        name = f"{COLOR_DIRECTORY}{name}{COLOR_RESET}"
    return f"{prefix}{connector}{name}\n"


def next_prefix(prefix: str, is_last: bool) -> str:
    """Derive the prefix for the children of an entry.

    Children of the last sibling get blank continuation since nothing follows
    below them at that level; all others get a vertical bar.

    Example:
        >>> next_prefix("", is_last=False)
        '│   '
        >>> next_prefix("│   ", is_last=True)
        '│       '
    """
    return prefix + (SPACE_INDENT if is_last else PIPE_INDENT)


class TreeRenderer:
    """Renders a directory hierarchy as an indented text tree.

    Entries are listed directories first, then files, each group in byte-wise name
    order. Excluded names are skipped and directories beyond the configured depth
    are not descended into. Directories that cannot be read are shown without
    children.

    Attributes:
        options (RenderOptions): Depth bound, color and exclusion settings.

    Example:
        >>> renderer = TreeRenderer(RenderOptions(max_depth=1))  # doctest: +SKIP
        >>> print(renderer.render("project"), end="")  # doctest: +SKIP
        ├── src
        │   └── main.py
        └── README.md
    """

    def __init__(self, options: Optional[RenderOptions] = None) -> None:
        """Initialize a TreeRenderer.

        Args:
            options: Rendering settings. Defaults to unbounded depth, no color and
                the built-in exclusions.
        """
        self.options = options if options is not None else RenderOptions()

    def stream_tree(self, root_path: PathType) -> Iterator[str]:
        """Generate the tree one line at a time.

        The root itself is not printed; the first line is its first visible child.
        Each line ends with a newline. Lines come in pre-order, so a directory's
        line always precedes those of its descendants.

        Args:
            root_path: Directory whose contents are rendered.

        Yields:
            Formatted lines of the tree.
        """
        yield from self._render(Path(root_path), "", 0)

    def render(self, root_path: PathType) -> str:
        """Return the complete tree as a single string.

        Returns:
            All lines of the tree concatenated. Empty if the root has no visible
            entries or cannot be read.
        """
        return "".join(self.stream_tree(root_path))

    def _render(self, path: Path, prefix: str, depth: int) -> Iterator[str]:
        """Recursive helper for stream_tree."""
        if self.options.depth_exceeded(depth):
            return

        entries = list_entries(path, self.options.exclusion_rules)
        for i, entry in enumerate(entries):
            is_last = i == len(entries) - 1
            yield format_entry(entry, prefix, is_last, self.options.use_color)
            if entry.is_dir:
                yield from self._render(path / entry.name, next_prefix(prefix, is_last), depth + 1)
