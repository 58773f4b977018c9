#!/usr/bin/env python3
"""
Legacy runner - forwards to the click CLI
"""

import sys
import os

# Add the src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from tau.cli.main import cli
from tau.config import config

if __name__ == "__main__":
    # Support legacy: main.py program.tau [args] → tau run program.tau [args]
    if len(sys.argv) >= 2 and sys.argv[1].endswith(config.source_extension):
        sys.argv.insert(1, 'run')

    cli()
