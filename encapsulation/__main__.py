"""
Encapsulation demo entry point.

Usage:
    python -m encapsulation
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
