"""
connect_four.interfaces - User interfaces for Connect Four

This package contains the command-line interface for playing a match.
"""

# Don't import anything here to avoid circular imports
__all__ = []
