"""Directory tree rendering utilities.

This package renders the structure of a directory as an indented text tree,
in the manner of the Unix ``tree`` command.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("directree")
except PackageNotFoundError:
    __version__ = "unknown"
