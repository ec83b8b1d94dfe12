"""
Errors raised by the console login pipeline.

Every stage raises a subclass of ConsoleLoginError. Underlying causes are
chained so they stay inspectable through ``__cause__``.
"""

__all__ = [
    'ConsoleLoginError',
    'ConfigError',
    'MissingVariable',
    'ProfileMismatch',
    'ExchangeFailed',
    'MalformedResponse',
    'UrlBuildError',
    'LaunchFailed',
]


class ConsoleLoginError(Exception):
    """Base for all console login failures."""


class ConfigError(ConsoleLoginError):
    pass


class MissingVariable(ConsoleLoginError):
    """A required environment variable is not set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing {name} variable")


class ProfileMismatch(ConsoleLoginError):
    """The requested profile is not the exported one."""

    def __init__(self, requested: str, exported: str):
        self.requested = requested
        self.exported = exported
        super().__init__(
            f"Requested profile '{requested}' is different than the "
            f"exported profile '{exported}'"
        )


class ExchangeFailed(ConsoleLoginError):
    """The federation endpoint did not issue a signin token."""

    def __init__(self, message: str, status_code=None):
        self.status_code = status_code
        super().__init__(message)


class MalformedResponse(ConsoleLoginError):
    pass


class UrlBuildError(ConsoleLoginError):
    pass


class LaunchFailed(ConsoleLoginError):
    pass
