"""
Shared test fixtures and configuration.
"""

import pytest
import os
import sys
from unittest.mock import MagicMock

# Add the parent directory to the path so we can import the awsconsole package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from awsconsole.credentials import Credentials

EXPORTED_ENVIRONMENT = {
    "AWS_PROFILE": "foo",
    "AWS_ACCESS_KEY_ID": "ASIAEXAMPLE",
    "AWS_SECRET_ACCESS_KEY": "secret/key+value",
    "AWS_SESSION_TOKEN": "session-token",
}

@pytest.fixture
def exported_env():
    """Environment of a shell with the 'foo' profile exported."""
    return dict(EXPORTED_ENVIRONMENT)

@pytest.fixture
def credentials():
    """Credentials matching the exported environment."""
    return Credentials("ASIAEXAMPLE", "secret/key+value", "session-token")

def make_response(status_code=200, json_body=None, json_error=None):
    """Build a mocked requests.Response."""
    mock_response = MagicMock()
    mock_response.status_code = status_code
    if json_error is not None:
        mock_response.json.side_effect = json_error
    else:
        mock_response.json.return_value = json_body
    return mock_response

@pytest.fixture
def response_factory():
    """Fixture returning the mocked response builder."""
    return make_response
