"""
Entry point for running stylegate as a module: python -m stylegate
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
