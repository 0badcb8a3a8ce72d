"""
Allow running the generator as a module:
    python3 -m fdboptgen --network --database fdb.options
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
