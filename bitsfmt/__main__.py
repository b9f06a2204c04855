"""
Run bitsfmt as a module: python -m bitsfmt 0xff
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
