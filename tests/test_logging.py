import json
import logging

from app.core.logging import LogContext, StructuredFormatter, get_logger


def test_get_logger_namespace():
    assert get_logger("x").name == "smartgov.x"


def test_log_context_attaches_fields():
    with LogContext(nrc="12345678", screen="pay"):
        record = logging.getLogRecordFactory()("smartgov.test", logging.INFO, __file__, 1, "hello", None, None)
    assert record.nrc == "12345678"
    assert record.screen == "pay"

    after = logging.getLogRecordFactory()("smartgov.test", logging.INFO, __file__, 1, "hello", None, None)
    assert not hasattr(after, "nrc")


def test_structured_formatter_outputs_context():
    record = logging.LogRecord("smartgov.test", logging.INFO, __file__, 1, "paid", None, None)
    record.endpoint = "payments.pay"
    data = json.loads(StructuredFormatter().format(record))
    assert data["message"] == "paid"
    assert data["endpoint"] == "payments.pay"
    assert data["level"] == "INFO"


def test_development_formatter_prints_context_fields():
    from app.core.logging import DevelopmentFormatter

    record = logging.LogRecord("smartgov.test", logging.INFO, __file__, 1, "paid", None, None)
    record.nrc = "12345678"
    record.screen = "pay"
    record.unrelated = "ignored"
    output = DevelopmentFormatter().format(record)
    assert "nrc=12345678" in output
    assert "screen=pay" in output
    assert "unrelated" not in output
