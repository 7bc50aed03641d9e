import json
import logging

from sla_service.shared.infrastructure.logging import (
    CustomJsonFormatter, get_context_logger, log_latency
)


def _format(record):
    formatter = CustomJsonFormatter(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
        environment="staging",
    )
    return json.loads(formatter.format(record))


def _record(**extra):
    record = logging.LogRecord("sla", logging.INFO, __file__, 1, "hello", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_adds_context_fields():
    data = _format(_record(correlation_id="abc"))
    assert data["message"] == "hello"
    assert data["correlation_id"] == "abc"
    assert data["environment"] == "staging"
    assert data["timestamp"]


def test_formatter_redacts_secrets():
    data = _format(_record(api_key="k-123", db_password="pw", sla_ref="A"))
    assert data["api_key"] == "***REDACTED***"
    assert data["db_password"] == "***REDACTED***"
    assert data["sla_ref"] == "A"


def test_context_logger_keeps_call_extra(caplog):
    log = get_context_logger("sla.test", "corr-1")
    with caplog.at_level(logging.INFO, logger="sla.test"):
        log.info("calculated", extra={"sla_ref": "B"})
    record = caplog.records[-1]
    assert record.correlation_id == "corr-1"
    assert record.sla_ref == "B"


def test_log_latency(caplog):
    logger = logging.getLogger("sla.latency")
    with caplog.at_level(logging.INFO, logger="sla.latency"):
        with log_latency(logger, "sla_calculation", sla_ref="C"):
            pass
    record = caplog.records[-1]
    assert record.getMessage() == "sla_calculation completed"
    assert record.latency_ms >= 0
    assert record.sla_ref == "C"
