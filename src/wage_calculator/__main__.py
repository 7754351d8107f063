"""Entry point for ``python -m wage_calculator``."""

import sys

from wage_calculator.cli import main

if __name__ == "__main__":
    sys.exit(main())
