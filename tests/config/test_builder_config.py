import pytest

from blazesql import BuilderConfig, ConfigurationError


def test_defaults():
    config = BuilderConfig()
    assert config.empty_in == "preserve"
    assert config.redact_params is True


def test_unknown_empty_in_policy_is_rejected():
    with pytest.raises(ConfigurationError):
        BuilderConfig(empty_in="drop")


def test_from_env_reads_prefixed_variables(monkeypatch):
    monkeypatch.setenv("BLAZESQL_EMPTY_IN", "Constant")
    monkeypatch.setenv("BLAZESQL_REDACT_PARAMS", "off")
    config = BuilderConfig.from_env()
    assert config.empty_in == "constant"
    assert config.redact_params is False


def test_from_env_without_variables_uses_defaults(monkeypatch):
    monkeypatch.delenv("BLAZESQL_EMPTY_IN", raising=False)
    monkeypatch.delenv("BLAZESQL_REDACT_PARAMS", raising=False)
    assert BuilderConfig.from_env() == BuilderConfig()


def test_from_env_custom_prefix_and_overrides(monkeypatch):
    monkeypatch.setenv("APP_SQL_EMPTY_IN", "constant")
    monkeypatch.setenv("APP_SQL_REDACT_PARAMS", "yes")
    config = BuilderConfig.from_env("APP_SQL_", redact_params=False)
    assert config.empty_in == "constant"
    assert config.redact_params is False


@pytest.mark.parametrize(
    "name, value",
    [("BLAZESQL_EMPTY_IN", "sometimes"), ("BLAZESQL_REDACT_PARAMS", "maybe")],
)
def test_from_env_rejects_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError):
        BuilderConfig.from_env()
