# -*- coding: utf-8 -*-
"""
🎙️ Protokoll CLI - Main package.

Architecture:
    client.py    - Communication with the MCP server (stdio)
    config.py    - protokoll-config.yaml loading
    factory.py   - Configured client factory
    commands/    - Click commands (status, task, transcript, context...)
    display.py   - Rich display helpers
    progress.py  - Progress rendering for long-running tools
    core/        - Local utilities (entity migration)
"""

from dotenv import load_dotenv

load_dotenv()

__version__ = "0.1.0"

# Global configuration
DEFAULT_SERVER_COMMAND = "protokoll-mcp"
CLIENT_NAME = "protokoll-cli"
