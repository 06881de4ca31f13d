"""
Entry point for running Rishah as a module.

Usage:
    python -m rishah [drawing.tldr]
"""

import sys

from rishah.main import main

if __name__ == "__main__":
    sys.exit(main())
