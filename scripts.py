"""Developer task shortcuts: ``python scripts.py <task>``."""

import subprocess
import sys

SOURCES = ["src", "tests"]


def _run(*command):
    subprocess.run(list(command), check=True)


def run_tests():
    _run("pytest")


def run_lint():
    _run("flake8", "--max-line-length", "120", *SOURCES)


def run_typecheck():
    _run("mypy", "src/nodetree")


def run_format():
    _run("black", *SOURCES)


def run_coverage():
    _run("pytest", "--cov=nodetree", "--cov-report=term-missing", "--cov-report=xml")


def run_checks():
    for task in (run_lint, run_typecheck, run_tests):
        task()


if __name__ == "__main__":
    globals()[sys.argv[1]]()
