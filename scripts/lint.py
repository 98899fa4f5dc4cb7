"""
Lint script runner.

Runs flake8 and then pylint over the interpreter package and the CLI entry
module. Tests are excluded from both.
"""
import subprocess
import sys

TARGETS = ["./plumelang", "./plume.py"]


def main() -> int:
    """
    Lint the Plume project using flake8 and pylint.
    """
    print("Running flake8...")
    flake8 = subprocess.run(
        ["flake8", *TARGETS, "--exclude=plumelang/tests", "--max-line-length=110"],
        check=False,
    )

    print("Running pylint...")
    pylint = subprocess.run(
        ["pylint", *TARGETS, "--ignore=tests", "--max-line-length=110"],
        check=False,
    )
    return flake8.returncode or pylint.returncode


if __name__ == "__main__":
    sys.exit(main())
