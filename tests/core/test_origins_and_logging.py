# tests/core/test_origins_and_logging.py
import json
import logging

from fifufa.core.logging_utils import JSONLogFormatter
from fifufa.core.errors import OriginRejectedError
from fifufa.core.origins import OriginGuard

def test_origin_guard_allows_missing_origin():
    guard = OriginGuard(["https://fifufa.app"])
    assert guard.is_allowed(None) is True
    assert guard.is_allowed("") is True

def test_origin_guard_checks_allow_list():
    guard = OriginGuard(["https://fifufa.app/"])
    assert guard.is_allowed("https://fifufa.app") is True
    assert guard.is_allowed("https://evil.example") is False
    assert guard.is_allowed("http://fifufa.app") is False

def test_preflight_headers_reflect_only_allowed_origins():
    guard = OriginGuard(["https://fifufa.app"])
    allowed = guard.preflight_headers("https://fifufa.app")
    assert allowed["Access-Control-Allow-Origin"] == "https://fifufa.app"
    assert allowed["Vary"] == "Origin"
    assert allowed["Access-Control-Allow-Methods"] == "GET, POST, OPTIONS"
    assert allowed["Access-Control-Max-Age"] == "86400"
    assert "Access-Control-Allow-Origin" not in guard.preflight_headers("https://evil.example")
    assert "Access-Control-Allow-Origin" not in guard.preflight_headers(None)

def test_json_formatter_includes_extra_fields():
    formatter = JSONLogFormatter(fmt_keys={"level": "levelname", "logger": "name"})
    record = logging.LogRecord("fifufa.test", logging.WARNING, __file__, 10, "Served %s", ("pizza",), None)
    record.language = "en"
    record.remaining = 3

    data = json.loads(formatter.format(record))
    assert data["message"] == "Served pizza"
    assert data["level"] == "WARNING"
    assert data["logger"] == "fifufa.test"
    assert data["language"] == "en"
    assert data["remaining"] == 3
    assert "timestamp" in data
    assert "msg" not in data

def test_origin_rejected_error_is_403():
    error = OriginRejectedError("https://evil.example")
    assert error.status_code == 403
    assert error.message == "Origin not allowed"
    assert error.origin == "https://evil.example"

def test_broken_logging_config_falls_back_to_basic_config(mocker):
    from fifufa import main

    mocker.patch("logging.config.dictConfig", side_effect=ValueError("bad handler"))
    basic_config = mocker.patch("logging.basicConfig")

    main.configure_logging_from_file()

    basic_config.assert_called_once()
    assert basic_config.call_args.kwargs["level"] == logging.INFO
