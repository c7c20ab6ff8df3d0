"""
Bento grid generator — entry point.

Usage:
    python -m bentogrid generate --width 800 --height 600 --rows 4 --cols 3
    python -m bentogrid generate --width 800 --height 600 --code 438200D
    python -m bentogrid encode --rows 4 --cols 3 --seed 13
    python -m bentogrid decode 438200D
"""

import sys

from bentogrid.app import main


if __name__ == "__main__":
    sys.exit(main())
