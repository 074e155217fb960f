#!/usr/bin/env python3
"""
Printful Canvas Sync

Uploads the first .png/.jpg in the current directory to Printful and
creates the "Canvas Print" sync product for it.

Usage:
    python3 sync_canvas.py
    python3 sync_canvas.py --directory artwork/ --verbose

See printful_sync/cli.py for all options.
"""

import sys

from printful_sync.cli import main

if __name__ == "__main__":
    sys.exit(main())
