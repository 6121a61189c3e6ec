import io
import json
import logging

import pydantic
import pytest

from naijatax.core import config
from naijatax.core.exceptions import InvalidIncomeError
from naijatax.core.logger import JsonFormatter


def test_test_profile_is_active():
    assert config.settings.ENV == "test"
    assert config.settings.DEFAULT_LANGUAGE == "en"


def test_default_language_is_normalized():
    assert config.BaseAppSettings(DEFAULT_LANGUAGE=" PG ").DEFAULT_LANGUAGE == "pg"


@pytest.mark.parametrize("overrides", [{"DEFAULT_LANGUAGE": "fr"}, {"LOG_FORMAT": "xml"}])
def test_invalid_settings_rejected(overrides):
    with pytest.raises(pydantic.ValidationError):
        config.BaseAppSettings(**overrides)


def test_prod_profile_logs_json():
    assert config.ProdSettings().LOG_FORMAT == "json"


def test_json_formatter_includes_extra():
    record = logging.LogRecord("naijatax.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.category = "freelancer"
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["extra"] == {"category": "freelancer"}


def test_exception_to_dict():
    exc = InvalidIncomeError("-1", "negative")
    assert exc.to_dict() == {
        "error": {
            "message": "Please enter a valid positive number for income (negative)",
            "code": "TAX300",
            "details": {"field": "income", "value": "-1", "reason": "negative"},
        }
    }
    assert exc.to_dict("Abeg")["error"]["message"] == "Abeg"


def test_json_formatter_filters_record_attributes():
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    log = logging.getLogger("naijatax.test.json")
    log.addHandler(handler)
    log.propagate = False
    try:
        try:
            raise ValueError("boom")
        except ValueError:
            log.exception("export failed", extra={"export_format": "pdf", "_private": 1})
    finally:
        log.removeHandler(handler)
        log.propagate = True

    payload = json.loads(stream.getvalue())
    assert payload["message"] == "export failed"
    assert payload["level"] == "ERROR"
    assert payload["extra"] == {"export_format": "pdf"}
    assert "ValueError: boom" in payload["exc_info"]
