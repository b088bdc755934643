#!/usr/bin/env python
"""
Run tests for the weather alert products library.

Usage:
    python run_tests.py              # Run all tests
    python run_tests.py -v           # Verbose output
    python run_tests.py --cov        # With coverage report for the package
"""

import subprocess
import sys


def main():
    """Run pytest with provided arguments."""
    args = ["pytest"]
    for arg in sys.argv[1:]:
        # Bare --cov measures the library package, not the tests
        args.append("--cov=weatheralerts" if arg == "--cov" else arg)

    if "-v" not in args and "--verbose" not in args:
        args.append("-v")

    result = subprocess.run(args)
    sys.exit(result.returncode)


if __name__ == "__main__":
    main()
