"""
Command-line interface for querytool.
"""

from .main import main

__all__ = ["main"]
