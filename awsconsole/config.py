"""Configuration for the console login tool."""

from typing import Optional

from .credentials.environment import EnvGetter, process_env_getter
from .errors import ConfigError, MissingVariable
from .federation.url import DEFAULT_ISSUER


class Config:
    """Optional settings, read from AWSCONSOLE_* environment variables."""

    def __init__(self, env_getter: EnvGetter = process_env_getter) -> None:
        self._env_getter = env_getter

        self.issuer = self._get('AWSCONSOLE_ISSUER') or DEFAULT_ISSUER
        self.log_level = self._get('AWSCONSOLE_LOG_LEVEL') or 'WARNING'
        self.timeout = self._parse_timeout(self._get('AWSCONSOLE_TIMEOUT'))

    def _get(self, name: str) -> Optional[str]:
        try:
            return self._env_getter(name)
        except MissingVariable:
            return None

    @staticmethod
    def _parse_timeout(value: Optional[str]) -> Optional[float]:
        """Parse a timeout in seconds; unset or empty means no timeout."""
        if not value:
            return None
        try:
            timeout = float(value)
        except ValueError:
            raise ConfigError(f"AWSCONSOLE_TIMEOUT must be a number of seconds, got '{value}'") from None
        if timeout <= 0:
            raise ConfigError(f"AWSCONSOLE_TIMEOUT must be positive, got '{value}'")
        return timeout

    def to_dict(self) -> dict:
        return {
            'issuer': self.issuer,
            'log_level': self.log_level,
            'timeout': self.timeout,
        }
