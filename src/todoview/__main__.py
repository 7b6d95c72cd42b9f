"""Entry point for running todoview as a module."""

import sys

from todoview.cli import main

if __name__ == "__main__":
    sys.exit(main())
