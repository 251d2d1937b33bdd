"""Development tasks for directree: python scripts.py <task>"""

import subprocess
import sys

SOURCES = ["src", "tests"]


def run_tests():
    subprocess.run(["pytest"], check=True)


def run_cli_tests():
    # Also runs the installed console script end to end
    subprocess.run(["pytest", "--run-cli-tests"], check=True)


def run_lint():
    subprocess.run(["flake8", *SOURCES], check=True)


def run_typecheck():
    subprocess.run(["mypy", "src"], check=True)


def run_format():
    subprocess.run(["black", *SOURCES], check=True)


def run_coverage():
    subprocess.run(["pytest", "--run-cli-tests", "--cov=directree", "--cov-report=xml"], check=True)


def run_checks():
    run_lint()
    run_typecheck()
    run_cli_tests()


TASKS = {name: task for name, task in globals().items() if name.startswith("run_")}

if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in TASKS:
        sys.exit(f"usage: python scripts.py {{{','.join(sorted(TASKS))}}}")
    TASKS[sys.argv[1]]()
