"""
Module execution entry point.

Allows running with: python -m edsign_cli
"""

import sys
from edsign_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
