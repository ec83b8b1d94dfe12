"""
Signin token exchange and console URL construction.
"""

from .token import get_signin_token, session_descriptor, federation_endpoint
from .url import get_console_url, get_destination_url, DEFAULT_ISSUER

__all__ = [
    'get_signin_token',
    'session_descriptor',
    'federation_endpoint',
    'get_console_url',
    'get_destination_url',
    'DEFAULT_ISSUER',
]
