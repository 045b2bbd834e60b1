"""
UCP Helper Commands

Command implementations for the ucp-helper CLI.
"""

from . import scaling

__all__ = ["scaling"]
