import json
import logging

from app.logging import JsonFormatter, MaskingFilter, RequestContextFilter


def test_request_id_header_and_propagation(client):
    resp = client.get("/__ok", headers={"X-Request-ID": "my-fixed-id-123"})
    assert resp.status_code == 200
    assert resp.headers.get("X-Request-ID") == "my-fixed-id-123"


def test_request_id_generated_when_absent(client):
    resp = client.get("/__ok")
    assert len(resp.headers.get("X-Request-ID", "")) == 32


def test_logs_include_request_context(client, caplog):
    caplog.set_level("INFO")
    resp = client.get("/__log?MID=M7&SID=S7", headers={"X-Request-ID": "rid-abc"})
    assert resp.status_code == 200
    record = next(r for r in caplog.records if r.getMessage() == "test log line")
    assert record.request_id == "rid-abc"
    assert (record.mid, record.sid) == ("M7", "S7")


def test_sensitive_fields_masked_in_info(monkeypatch, caplog):
    monkeypatch.setenv("APP_ENV", "testing")
    caplog.set_level("INFO")
    caplog.handler.addFilter(MaskingFilter())
    logger = logging.getLogger("mask_test")
    logger.info({"S3_SECRET_KEY": "abc", "password": "hunter2", "MID": "M1"})
    record = next(r for r in caplog.records if r.name == "mask_test")
    assert record.msg["S3_SECRET_KEY"] == "[REDACTED]"
    assert record.msg["password"] == "[REDACTED]"
    assert record.msg["MID"] == "M1"


def test_sensitive_fields_visible_in_debug(monkeypatch, caplog):
    monkeypatch.setenv("APP_ENV", "development")
    caplog.set_level("DEBUG")
    caplog.handler.addFilter(MaskingFilter())
    logger = logging.getLogger("mask_test_debug")
    logger.debug({"password": "secret"})
    record = next(r for r in caplog.records if r.name == "mask_test_debug")
    assert record.msg["password"] == "secret"


def test_json_formatter_outside_request():
    record = logging.LogRecord("menu", logging.INFO, __file__, 1, {"event": "menu_import", "items": 3}, None, None)
    RequestContextFilter().filter(record)
    line = json.loads(JsonFormatter().format(record))
    assert line["event"] == "menu_import"
    assert line["items"] == 3
    assert line["request_id"] == "n/a"
    assert line["mid"] == "n/a"
