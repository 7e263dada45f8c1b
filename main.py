#!/usr/bin/env python3
"""
Catalog feed checker.
Downloads the product feed, counts its records and reports oversized descriptions.
"""

import os
import sys

# Add src to path for imports
sys.path.append(os.path.join(os.path.dirname(__file__), "src"))

from feed.cli import main  # noqa: E402

if __name__ == "__main__":
    main()
