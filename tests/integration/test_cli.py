"""Integration tests for the command-line interface.

These tests run directree in a subprocess and cover:
- Default rendering and ordering
- Depth limiting
- Directory and file exclusions
- Output file verification
- Clipboard command piping and failure
- Version information
"""

import shlex
import subprocess
import sys

import pytest

# These tests start a Python interpreter per test and only run with --run-cli-tests
pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


@pytest.fixture
def temp_project(tmp_path):
    """Create a temporary project directory with test files."""
    base_dir = tmp_path / "project"
    (base_dir / "src" / "utils").mkdir(parents=True)
    (base_dir / "docs").mkdir()
    (base_dir / "node_modules" / "left-pad").mkdir(parents=True)
    (base_dir / ".git").mkdir()
    (base_dir / "build").mkdir()

    (base_dir / "src" / "main.py").write_text("def main():\n    print('Hello')\n")
    (base_dir / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
    (base_dir / "docs" / "README.md").write_text("# Test Project\n")
    (base_dir / "build" / "output.min.js").write_text("console.log('test')\n")
    (base_dir / ".gitignore").write_text("build/\n")
    (base_dir / "server.log").write_text("DEBUG: test log\n")
    (base_dir / "package.json").write_text('{"name": "test"}\n')

    return base_dir


def run_cli(args, cwd=None, timeout=10):
    """Run the directree CLI with the given arguments and capture its output as UTF-8 text."""
    cmd = [sys.executable, "-m", "directree"] + args
    return subprocess.run(cmd, capture_output=True, encoding="utf-8", cwd=cwd, timeout=timeout)


def test_cli_default_rendering(temp_project):
    result = run_cli([str(temp_project)])

    assert result.returncode == 0
    assert result.stdout == (
        "├── build\n"
        "│   └── output.min.js\n"
        "├── docs\n"
        "│   └── README.md\n"
        "├── src\n"
        "│   ├── utils\n"
        "│   │   └── helpers.py\n"
        "│   └── main.py\n"
        "├── package.json\n"
        "└── server.log\n"
        "\n"
    )
    assert result.stderr == ""


def test_cli_current_directory(temp_project):
    result = run_cli(["-max-depth", "0"], cwd=temp_project)

    assert result.returncode == 0
    assert result.stdout == "├── build\n├── docs\n├── src\n├── package.json\n└── server.log\n\n"


def test_cli_exclusions(temp_project):
    result = run_cli(["-exclude", "build", "-exclude", "src", "-exclude-file", "server.log", str(temp_project)])

    assert result.returncode == 0
    assert result.stdout == "├── docs\n│   └── README.md\n└── package.json\n\n"


def test_cli_double_dash_options(temp_project):
    result = run_cli(["--max-depth", "0", "--exclude", "build", str(temp_project)])

    assert result.returncode == 0
    assert result.stdout == "├── docs\n├── src\n├── package.json\n└── server.log\n\n"


def test_cli_output_file_verification(temp_project, tmp_path):
    output_file = tmp_path / "tree.txt"

    result = run_cli(["-o", str(output_file), str(temp_project)])

    assert result.returncode == 0
    saved = output_file.read_bytes().decode("utf-8")
    assert result.stdout == saved + "\n"
    assert saved.endswith("└── server.log\n")


def test_cli_output_file_failure(temp_project, tmp_path):
    result = run_cli(["-o", str(tmp_path / "missing" / "tree.txt"), str(temp_project)])

    assert result.returncode == 1
    assert result.stdout.endswith("└── server.log\n\n")
    assert "Error: Cannot write output file" in result.stderr


@pytest.mark.skipif(sys.platform == "win32", reason="Command strings are split with POSIX rules")
def test_cli_clip_command(temp_project, tmp_path):
    clipboard = tmp_path / "clipboard.txt"
    script = f"import sys; open({str(clipboard)!r}, 'wb').write(sys.stdin.buffer.read())"
    command = " ".join(shlex.quote(part) for part in [sys.executable, "-c", script])

    result = run_cli(["-clip-command", command, str(temp_project)])

    assert result.returncode == 0
    assert result.stdout == clipboard.read_bytes().decode("utf-8") + "\n"


def test_cli_clip_command_missing(temp_project):
    result = run_cli(["-clip-command", "directree-no-such-clipboard-tool", str(temp_project)])

    assert result.returncode == 1
    assert result.stdout.endswith("└── server.log\n\n")
    assert "Error: Clipboard command not found: directree-no-such-clipboard-tool" in result.stderr


def test_cli_empty_directory(tmp_path):
    result = run_cli([str(tmp_path)])

    assert result.returncode == 0
    assert result.stdout == "\n"


def test_cli_invalid_max_depth(temp_project):
    result = run_cli(["-max-depth", "-3", str(temp_project)])

    assert result.returncode == 2
    assert result.stdout == ""
    assert "-max-depth" in result.stderr


def test_cli_version_info():
    result = run_cli(["--version"])

    assert result.returncode == 0
    assert result.stdout.startswith("directree ")
