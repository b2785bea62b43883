# -*- coding: utf-8 -*-
"""Entry point for ``python -m protokoll_cli``."""

from .commands import cli

if __name__ == "__main__":
    cli()
