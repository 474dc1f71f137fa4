"""
dynarray CLI entry point.

Usage:
    python -m dynarray.cli apply "push_back 1" "push_front 0"
    python -m dynarray.cli demo
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
