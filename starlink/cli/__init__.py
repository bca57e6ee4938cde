"""Command-line interface for starlink.

This module provides the CLI functionality for repository suggestions.
"""

from .main import main

__all__ = ["main"]
