#!/usr/bin/env python3
"""
srtconv Entry Point Script

This script initializes the CLI handler and runs the text-to-SRT conversion.
"""

import sys
from srtconv.cli import CLIHandler

if __name__ == "__main__":
    # Basic check for minimal Python version if necessary
    if sys.version_info < (3, 8):
        sys.stderr.write("srtconv requires Python 3.8 or later.\n")
        sys.exit(1)

    cli = CLIHandler()
    sys.exit(cli.run())
