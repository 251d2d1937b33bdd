"""Command-line interface for directree.

This module provides the command-line entry point: it parses arguments, renders the
tree, and delivers it to standard output, the clipboard and an output file, in that
order.

Error Handling:
    Directories that cannot be read while rendering are shown without children and
    never stop the program. Failing to deliver the tree to the clipboard or to the
    output file is fatal: an error is printed to stderr and the process exits with
    status 1. Anything already printed to stdout stays printed.

Exit Codes:
    0: Successful completion
    1: Output sink failure or other runtime error
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Render a project two levels deep and save a copy
    $ directree -max-depth 1 -o tree.txt /path/to/project
"""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence

from directree.cli.argparser import UNBOUNDED_DEPTH, create_parser, validate_args
from directree.cli.interrupts import interrupt_monitor
from directree.cli.safe_writer import SafeWriter
from directree.clipboard import ClipboardWriter, CommandClipboardWriter, PyperclipWriter
from directree.exceptions import ClipboardError, OutputFileError
from directree.exclusion_rules.name_rules import NameExclusionRules
from directree.file_system_tree.render_options import RenderOptions
from directree.file_system_tree.tree_renderer import TreeRenderer


def build_render_options(args: argparse.Namespace) -> RenderOptions:
    """Translate parsed arguments into rendering settings.

    Args:
        args: Validated command-line arguments.

    Returns:
        The immutable settings for this run.
    """
    return RenderOptions(
        max_depth=None if args.max_depth == UNBOUNDED_DEPTH else args.max_depth,
        use_color=args.color,
        exclusion_rules=NameExclusionRules(exclude_dirs=args.exclude, exclude_files=args.exclude_file),
    )


def create_clipboard_writer(args: argparse.Namespace) -> ClipboardWriter:
    """Pick the clipboard writer requested on the command line."""
    if args.clip_command:
        return CommandClipboardWriter(args.clip_command)
    return PyperclipWriter()


def print_tree(lines: Iterable[str]) -> str:
    """Print tree lines to stdout as they are rendered, followed by a blank line.

    Lines are written one at a time, so an interrupt stops the directory walk at
    the next line instead of after the whole tree has been built.

    Args:
        lines: Tree lines, typically TreeRenderer.stream_tree().

    Returns:
        The tree as printed, without the trailing blank line.

    Raises:
        BrokenPipeError: If the output pipe closed or an interrupt arrived.
    """
    printed: List[str] = []

    def record() -> Iterator[str]:
        for line in lines:
            printed.append(line)
            yield line

    with SafeWriter(sys.stdout.fileno()) as stdout_writer:
        stdout_writer.write_lines(record())
        stdout_writer.write("\n")
    return "".join(printed)


def save_to_file(tree: str, output_path: Path) -> None:
    """Write the tree to a file, replacing any previous contents.

    The file receives the tree exactly as rendered, without the blank line that
    follows it on stdout.

    Raises:
        OutputFileError: If the file cannot be opened or written.
    """
    try:
        with SafeWriter(output_path) as file_writer:
            file_writer.write(tree)
    except BrokenPipeError:
        raise
    except OSError as e:
        raise OutputFileError(str(output_path), e.strerror or str(e)) from e


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the directree command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv[1:].

    Exit codes:
        0: Successful completion
        1: Output sink failure or other runtime error
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    interrupt_monitor.install()

    parser = create_parser()
    args = parser.parse_args(argv)
    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        renderer = TreeRenderer(build_render_options(args))

        try:
            tree = print_tree(renderer.stream_tree(args.directory))

            # Remaining sinks are skipped once the user or the pipe reader has stopped us
            if args.clip and not interrupt_monitor.interrupted():
                create_clipboard_writer(args).copy(tree)

            if args.output and not interrupt_monitor.interrupted():
                save_to_file(tree, args.output)

        except BrokenPipeError:
            pass

    except ClipboardError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        if not args.clip_command:
            print("To use a specific clipboard utility, name it with -clip-command:", file=sys.stderr)
            print("    directree -clip-command pbcopy", file=sys.stderr)
            print('    directree -clip-command "xclip -selection clipboard"', file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = interrupt_monitor.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
