import logging
import webbrowser

from ..errors import LaunchFailed

logger = logging.getLogger(__name__)

def open_in_browser(url: str) -> None:
    """
    Open a URL in the default browser.

    Args:
        url: The URL to open

    Raises:
        LaunchFailed: No browser could be located or started
    """
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        raise LaunchFailed(f"Failed to open the browser: {e}") from e

    if not opened:
        raise LaunchFailed("Failed to open the browser: no usable browser found")

    logger.debug("Opened console URL in the default browser")
