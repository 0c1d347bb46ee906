import pytest
from zeroarg.common.exceptions import ConfigurationError
from zeroarg.common.logging import LogFormat
from zeroarg.config.app_config import AppConfig, LoggingConfig, LogLevel


def test_defaults(clean_env: None) -> None:
    config = AppConfig.from_env()

    assert config.logging.level == LogLevel.WARNING
    assert config.logging.format == LogFormat.PLAIN


def test_from_env_reads_logging_values() -> None:
    config = AppConfig.from_env(
        environ={"ZEROARG_LOG_LEVEL": "debug", "ZEROARG_LOG_FORMAT": "JSON"}
    )

    assert config.logging == LoggingConfig(level=LogLevel.DEBUG, format=LogFormat.JSON)


def test_from_env_uses_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ZEROARG_LOG_LEVEL", "error")
    monkeypatch.delenv("ZEROARG_LOG_FORMAT", raising=False)

    assert AppConfig.from_env().logging.level == LogLevel.ERROR


def test_empty_values_fall_back_to_defaults() -> None:
    config = AppConfig.from_env(environ={"ZEROARG_LOG_LEVEL": ""})

    assert config.logging.level == LogLevel.WARNING


@pytest.mark.parametrize(
    "environ",
    [{"ZEROARG_LOG_LEVEL": "chatty"}, {"ZEROARG_LOG_FORMAT": "xml"}],
)
def test_invalid_values_raise_configuration_error(environ: dict[str, str]) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        AppConfig.from_env(environ=environ)

    assert excinfo.value.details["errors"]


def test_overrides_take_precedence() -> None:
    config = AppConfig.from_env(environ={"ZEROARG_LOG_LEVEL": "ERROR"})

    overridden = config.with_overrides(level="info", log_format="console")

    assert overridden.logging.level == LogLevel.INFO
    assert overridden.logging.format == LogFormat.CONSOLE
    assert config.logging.level == LogLevel.ERROR


def test_overrides_keep_unset_values() -> None:
    config = AppConfig.from_env(environ={"ZEROARG_LOG_FORMAT": "json"})

    assert config.with_overrides().logging.format == LogFormat.JSON
