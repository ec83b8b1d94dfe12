"""
Credential loading from the process environment.
"""

from .environment import EnvGetter, process_env_getter, mapping_env_getter
from .extractor import Credentials, extract_credentials

__all__ = [
    'EnvGetter',
    'process_env_getter',
    'mapping_env_getter',
    'Credentials',
    'extract_credentials',
]
