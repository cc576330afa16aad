"""Allow ``python -m linker``."""

import sys

from linker.cli import main

if __name__ == "__main__":
    sys.exit(main())
