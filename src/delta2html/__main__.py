#!/usr/bin/env python3
"""Entry point for running delta2html as a module.

This allows the package to be executed as:
    python -m delta2html [arguments]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
