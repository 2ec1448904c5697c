"""
Command-line programs for the Up client.
"""

from .main import cli

__all__ = ['cli']
