"""Entry point for `python -m animearena`."""

import sys

from animearena.demo import main

if __name__ == "__main__":
    sys.exit(main())
