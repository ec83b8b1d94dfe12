import pytest
from awsconsole.config import Config
from awsconsole.credentials import mapping_env_getter
from awsconsole.errors import ConfigError

def test_config_defaults():
    """Test defaults when nothing is configured."""
    config = Config(mapping_env_getter({}))

    assert config.to_dict() == {
        "issuer": "wojteks-app",
        "log_level": "WARNING",
        "timeout": None,
    }

def test_config_from_environment():
    """Test reading overrides from the environment."""
    config = Config(mapping_env_getter({
        "AWSCONSOLE_ISSUER": "my-tool",
        "AWSCONSOLE_LOG_LEVEL": "DEBUG",
        "AWSCONSOLE_TIMEOUT": "2.5",
    }))

    assert config.issuer == "my-tool"
    assert config.log_level == "DEBUG"
    assert config.timeout == 2.5

def test_config_empty_timeout_means_none():
    """Test that an empty timeout disables it."""
    config = Config(mapping_env_getter({"AWSCONSOLE_TIMEOUT": ""}))

    assert config.timeout is None

@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_config_invalid_timeout(value):
    """Test rejecting invalid timeouts."""
    with pytest.raises(ConfigError):
        Config(mapping_env_getter({"AWSCONSOLE_TIMEOUT": value}))
