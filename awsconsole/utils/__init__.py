"""
Utility functions for the console login tool.
"""

from .launcher import open_in_browser
from .logger import setup_logging

__all__ = [
    'open_in_browser',
    'setup_logging',
]
