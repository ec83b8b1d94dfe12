import os
from typing import Callable, Mapping

from ..errors import MissingVariable

# Reads one variable by name, raising MissingVariable when it is not set.
EnvGetter = Callable[[str], str]

def process_env_getter(name: str) -> str:
    """
    Read a variable from the process environment.

    Args:
        name: Name of the environment variable

    Returns:
        str: The variable's value (an empty value counts as set)
    """
    value = os.environ.get(name)
    if value is None:
        raise MissingVariable(name)
    return value

def mapping_env_getter(variables: Mapping[str, str]) -> EnvGetter:
    """
    Build an env getter backed by a plain mapping instead of os.environ.

    Args:
        variables: Variable names and values to serve

    Returns:
        EnvGetter: Getter that looks names up in ``variables``
    """
    snapshot = dict(variables)

    def getter(name: str) -> str:
        try:
            return snapshot[name]
        except KeyError:
            raise MissingVariable(name) from None

    return getter
