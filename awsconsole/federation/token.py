"""
Token Exchanger

Trades temporary credentials for a short-lived signin token at the regional
AWS federation endpoint.
"""

import json
import logging
from typing import Dict, Optional

import requests

from ..credentials import Credentials
from ..errors import ExchangeFailed, MalformedResponse

__all__ = [
    'get_signin_token',
    'session_descriptor',
    'federation_endpoint',
]

logger = logging.getLogger(__name__)

# Accepted names for the token field of the getSigninToken response
SIGNIN_TOKEN_FIELDS = ("SigninToken", "signin_token")

def federation_endpoint(region: str) -> str:
    """Return the getSigninToken endpoint for a region."""
    return f"https://{region}.signin.aws.amazon.com/federation"

def session_descriptor(credentials: Credentials) -> Dict[str, str]:
    """
    Map credentials onto the field names the federation endpoint expects.

    Args:
        credentials: Credentials of the exported profile

    Returns:
        Dict[str, str]: The ``Session`` object of a getSigninToken request
    """
    return {
        "sessionId": credentials.access_key_id,
        "sessionKey": credentials.secret_access_key,
        "sessionToken": credentials.session_token,
    }

def _parse_signin_token(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError as e:
        raise MalformedResponse("Failed to deserialize the getSigninToken response") from e

    if not isinstance(body, dict):
        raise MalformedResponse("getSigninToken response is not a JSON object")

    for field in SIGNIN_TOKEN_FIELDS:
        token = body.get(field)
        if isinstance(token, str):
            return token

    raise MalformedResponse("getSigninToken response has no SigninToken field")

def get_signin_token(credentials: Credentials, region: str,
                     timeout: Optional[float] = None) -> str:
    """
    Exchange credentials for a signin token.

    A single GET request is issued; failures are not retried.

    Args:
        credentials: Credentials of the exported profile
        region: AWS region whose federation endpoint is used
        timeout: Request timeout in seconds (None waits indefinitely)

    Returns:
        str: The signin token

    Raises:
        ExchangeFailed: The request failed or returned a non-success status
        MalformedResponse: The response body carries no signin token
    """
    request_url = federation_endpoint(region)
    params = {
        "Action": "getSigninToken",
        "Session": json.dumps(session_descriptor(credentials)),
    }

    logger.debug("Requesting signin token from %s", request_url)
    try:
        response = requests.get(request_url, params=params, timeout=timeout)
    except requests.RequestException as e:
        raise ExchangeFailed(f"The getSigninToken request to {request_url} failed: {e}") from e

    if not 200 <= response.status_code < 300:
        raise ExchangeFailed(
            f"getSigninToken request failed with HTTP {response.status_code}",
            status_code=response.status_code,
        )

    logger.debug("getSigninToken returned HTTP %s", response.status_code)
    return _parse_signin_token(response)
