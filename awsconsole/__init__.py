"""
awsconsole - open the AWS web console with the exported profile's credentials.
"""

from .console import run
from .config import Config
from .errors import ConsoleLoginError

__all__ = [
    'run',
    'Config',
    'ConsoleLoginError',
]
