"""Test configuration and fixtures for directree."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def example_tree(tmp_path):
    """Create the small tree used throughout the documentation.

    Layout: directory ``b`` (empty), directory ``a`` holding ``x.txt``, and file ``z.txt``.
    """
    (tmp_path / "b").mkdir()
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "x.txt").write_text("x")
    (tmp_path / "z.txt").write_text("z")
    return tmp_path


@pytest.fixture
def example_tree_output():
    """Expected rendering of example_tree without color and without a depth bound."""
    return "├── a\n│   └── x.txt\n├── b\n└── z.txt\n"
