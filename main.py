#!/usr/bin/env python3

import sys

from cybertron.cli import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nBattle interrupted by user")
        sys.exit(130)
