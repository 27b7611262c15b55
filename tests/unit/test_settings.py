import pytest
from pydantic import ValidationError

from record_cleaner.config import Settings


def _settings(**overrides) -> Settings:
    values = {"DATABASE_URL": "sqlite+pysqlite:///:memory:", "OPERATOR_ID": "ops"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_defaults():
    settings = _settings()
    assert settings.translation_locale == "en_US"
    assert settings.log_level == "INFO"
    assert settings.cleanup_interval_seconds == 86400


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"OPERATOR_ID": "  "}, "OPERATOR_ID is required"),
        ({"LOG_LEVEL": "chatty"}, "LOG_LEVEL must be one of"),
        ({"CLEANUP_INTERVAL_SECONDS": 5}, "CLEANUP_INTERVAL_SECONDS must be >= 60"),
        ({"TRANSLATION_LOCALE": ""}, "TRANSLATION_LOCALE must not be empty"),
    ],
)
def test_invalid_runtime_settings_are_rejected(overrides, message):
    with pytest.raises(ValidationError, match=message):
        _settings(**overrides)
