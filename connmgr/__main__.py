"""Allow running as ``python -m connmgr``."""

import sys

from connmgr.cli import main

if __name__ == "__main__":
    sys.exit(main())
