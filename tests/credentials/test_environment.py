import pytest
from awsconsole.credentials.environment import process_env_getter, mapping_env_getter
from awsconsole.errors import MissingVariable

def test_process_env_getter_reads_variable(monkeypatch):
    """Test reading a variable from the process environment."""
    monkeypatch.setenv("AWSCONSOLE_TEST_VAR", "value")

    assert process_env_getter("AWSCONSOLE_TEST_VAR") == "value"

def test_process_env_getter_missing_variable(monkeypatch):
    """Test reading an unset variable from the process environment."""
    monkeypatch.delenv("AWSCONSOLE_TEST_VAR", raising=False)

    with pytest.raises(MissingVariable) as exc_info:
        process_env_getter("AWSCONSOLE_TEST_VAR")

    assert exc_info.value.name == "AWSCONSOLE_TEST_VAR"

def test_process_env_getter_empty_value_is_set(monkeypatch):
    """Test that an empty variable counts as set."""
    monkeypatch.setenv("AWSCONSOLE_TEST_VAR", "")

    assert process_env_getter("AWSCONSOLE_TEST_VAR") == ""

def test_mapping_env_getter():
    """Test the mapping backed getter."""
    getter = mapping_env_getter({"AWS_PROFILE": "dev"})

    assert getter("AWS_PROFILE") == "dev"
    with pytest.raises(MissingVariable, match="Missing AWS_REGION variable"):
        getter("AWS_REGION")

def test_mapping_env_getter_copies_mapping():
    """Test that later changes to the source mapping are not seen."""
    variables = {"AWS_PROFILE": "dev"}
    getter = mapping_env_getter(variables)

    variables["AWS_PROFILE"] = "prod"

    assert getter("AWS_PROFILE") == "dev"
