"""Allow ``python -m rpath`` to run the command line interface."""

import sys

from rpath.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
