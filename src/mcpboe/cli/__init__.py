"""
Command-line interface for MCPBoe.

Usage:
    mcpboe search "protección de datos"   # Search consolidated legislation
    mcpboe law BOE-A-2018-16673           # Fetch one law
    mcpboe summary 20240115               # BOE summary for a day
    mcpboe codes 1234 5678                # Describe auxiliary codes
"""

from .main import main

__all__ = ["main"]
