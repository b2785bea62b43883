# -*- coding: utf-8 -*-
"""Local utilities that run without the MCP server."""
