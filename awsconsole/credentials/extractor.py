"""
Credential Extractor

Pulls the temporary credentials of the exported AWS profile out of the
environment. The profile named on the command line has to match AWS_PROFILE,
so a shell exported for one account never signs in to another by accident.
"""

import logging
from typing import NamedTuple

from ..errors import ProfileMismatch
from .environment import EnvGetter, process_env_getter

__all__ = [
    'Credentials',
    'extract_credentials',
    'PROFILE_VARIABLE',
    'CREDENTIAL_VARIABLES',
]

logger = logging.getLogger(__name__)

PROFILE_VARIABLE = "AWS_PROFILE"

# Read in this order; the first missing one aborts extraction.
CREDENTIAL_VARIABLES = (
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
)

class Credentials(NamedTuple):
    """Temporary credentials of the exported profile."""
    access_key_id: str
    secret_access_key: str
    session_token: str

    def __repr__(self) -> str:
        return f"Credentials(access_key_id={self.access_key_id!r}, secret_access_key='***', session_token='***')"

def extract_credentials(profile_name: str, env_getter: EnvGetter = process_env_getter) -> Credentials:
    """
    Read and validate the credentials of the exported profile.

    Args:
        profile_name: Profile the user asked to sign in with
        env_getter: Source of environment variables

    Returns:
        Credentials: The exported profile's credentials

    Raises:
        MissingVariable: AWS_PROFILE or one of the credential variables is not set
        ProfileMismatch: profile_name differs from the exported AWS_PROFILE
    """
    exported_profile = env_getter(PROFILE_VARIABLE)

    if profile_name != exported_profile:
        raise ProfileMismatch(profile_name, exported_profile)

    access_key_id = env_getter("AWS_ACCESS_KEY_ID")
    secret_access_key = env_getter("AWS_SECRET_ACCESS_KEY")
    session_token = env_getter("AWS_SESSION_TOKEN")

    logger.debug("Loaded credentials for profile %s", profile_name)
    return Credentials(access_key_id, secret_access_key, session_token)
