from urllib.parse import urlencode

from ..errors import UrlBuildError

SIGNIN_URL = "https://signin.aws.amazon.com/federation"
DEFAULT_ISSUER = "wojteks-app"

def get_destination_url(region: str) -> str:
    """
    Get the console home page of a region.

    Args:
        region: AWS region

    Returns:
        str: The console home URL for the region
    """
    return f"https://{region}.console.aws.amazon.com/console/home?region={region}"

def get_console_url(signin_token: str, region: str, issuer: str = DEFAULT_ISSUER) -> str:
    """
    Build the federation login URL that opens the console with a signin token.

    Args:
        signin_token: Token issued by getSigninToken
        region: AWS region to land in
        issuer: Identifier of the application issuing the login

    Returns:
        str: The console login URL
    """
    if not signin_token:
        raise UrlBuildError("Failed to build the URL: empty signin token")
    if not region:
        raise UrlBuildError("Failed to build the URL: empty region")

    query = urlencode([
        ("Action", "login"),
        ("Issuer", issuer),
        ("Destination", get_destination_url(region)),
        ("SigninToken", signin_token),
    ])
    return f"{SIGNIN_URL}?{query}"
