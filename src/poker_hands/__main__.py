"""CLI entry point: python -m poker_hands HAND_A HAND_B"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
