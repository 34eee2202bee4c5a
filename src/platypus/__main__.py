"""Allow running the package with `python -m platypus`."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
