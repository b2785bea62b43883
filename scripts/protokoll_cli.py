#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
🎙️ Protokoll CLI - Entry point without installation.

Usage:
    python scripts/protokoll_cli.py [COMMAND] [ARGS]
    python scripts/protokoll_cli.py transcript list

Once the package is installed (pip install -e .), use `protokoll` instead.
All the logic lives in src/protokoll_cli/.
"""

import os
import sys

# Make src/ importable when running from a checkout
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from protokoll_cli.commands import cli

if __name__ == "__main__":
    cli()
