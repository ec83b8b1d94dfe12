"""
Console Login

Wires the pipeline together: extract credentials, exchange them for a signin
token, build the console URL and open it. Each stage raises on failure, so a
failing stage stops everything after it.
"""

import logging
from typing import Optional

from .config import Config
from .credentials import EnvGetter, extract_credentials, process_env_getter
from .federation import get_console_url, get_signin_token
from .utils.launcher import open_in_browser

__all__ = ['run']

logger = logging.getLogger(__name__)

def run(profile_name: str, region: str,
        env_getter: EnvGetter = process_env_getter,
        launch: bool = True,
        config: Optional[Config] = None) -> str:
    """
    Sign in to the AWS console with the exported profile's credentials.

    Args:
        profile_name: Profile the user asked to sign in with
        region: AWS region for the federation endpoint and the console
        env_getter: Source of environment variables
        launch: Open the URL in the default browser
        config: Tool settings (read from the environment if None)

    Returns:
        str: The console login URL
    """
    if config is None:
        config = Config(env_getter)

    credentials = extract_credentials(profile_name, env_getter)
    signin_token = get_signin_token(credentials, region, timeout=config.timeout)
    console_url = get_console_url(signin_token, region, issuer=config.issuer)

    if launch:
        logger.info("Opening the %s console for profile %s", region, profile_name)
        open_in_browser(console_url)

    return console_url
