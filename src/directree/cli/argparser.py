"""Command-line argument parsing for directree.

This module defines the command-line interface for directree,
handling argument parsing and validation. Long options are accepted
both with a single dash (``-max-depth``) and with two (``--max-depth``).
"""

import argparse
from pathlib import Path

from directree import __version__

UNBOUNDED_DEPTH = -1


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with directree's options.
    """
    description = """
    directree: Generate a tree-like visualization of directory structure.

    The contents of DIRECTORY (default: the current directory) are printed as an
    indented tree, directories first, then files, each group sorted by name.
    Version-control metadata, editor settings and dependency caches are left out
    by default:

      directories: .git, __pycache__, node_modules, .idea, .vscode
      files:       .DS_Store, .gitignore

    The tree is always printed to standard output. It can additionally be saved
    to a file and copied to the clipboard.
    """

    epilog = """
    Examples:
      # Render the current directory
      directree

      # Limit depth and color directory names
      directree -max-depth 3 -color ~/projects

      # Hide more directories and files
      directree -exclude build -exclude dist -exclude-file Thumbs.db

      # Save the tree to a file as well
      directree -o tree.txt ~/projects

      # Copy the tree to the clipboard
      directree -clip
      directree -clip-command "xclip -selection clipboard"
    """

    parser = argparse.ArgumentParser(
        prog="directree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"directree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to render (default: current directory).",
    )
    parser.add_argument(
        "-max-depth",
        "--max-depth",
        dest="max_depth",
        type=int,
        default=UNBOUNDED_DEPTH,
        metavar="N",
        help=(
            "Maximum depth to traverse; the root's entries are depth 0 (default: -1, unbounded). "
            "Values below -1 are rejected."
        ),
    )
    parser.add_argument(
        "-color",
        "--color",
        dest="color",
        action="store_true",
        help="Enable colored output for directory names.",
    )
    parser.add_argument(
        "-exclude",
        "--exclude",
        dest="exclude",
        action="append",
        default=[],
        metavar="NAME",
        help="Directory name to exclude (can be specified multiple times).",
    )
    parser.add_argument(
        "-exclude-file",
        "--exclude-file",
        dest="exclude_file",
        action="append",
        default=[],
        metavar="NAME",
        help="File name to exclude (can be specified multiple times).",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output",
        type=Path,
        metavar="FILE",
        help="Also write the tree to FILE. The tree is still printed to stdout.",
    )
    parser.add_argument(
        "-clip",
        "--clip",
        dest="clip",
        action="store_true",
        help="Copy the tree to the clipboard.",
    )
    parser.add_argument(
        "-clip-command",
        "--clip-command",
        dest="clip_command",
        metavar="CMD",
        help=(
            "Command to pipe the tree into for clipboard copying (e.g. pbcopy, clip). "
            "Implies -clip. Without it, the platform clipboard is used directly."
        ),
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle, and fills in
    options implied by others.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.max_depth < UNBOUNDED_DEPTH:
        raise ValueError(f"-max-depth must be {UNBOUNDED_DEPTH} (unbounded) or a non-negative integer")

    if args.clip_command is not None:
        if not args.clip_command.strip():
            raise ValueError("-clip-command must not be empty")
        args.clip = True
