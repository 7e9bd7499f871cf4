from __future__ import annotations

import logging
from contextlib import contextmanager

import pytest

from errchain.core import ChainedError, Kind, Op, Severity, instrument_errchain, log_error, log_level, new, span

LOGGER = "errchain.core.telemetry"


class FakeLogfire:
    def __init__(self) -> None:
        self.spans: list[tuple[str, dict]] = []

    @contextmanager
    def span(self, name: str, **attributes):
        self.spans.append((name, attributes))
        yield


class TestTelemetry:
    def test_span_noop_when_logfire_missing(self, monkeypatch):
        monkeypatch.setattr("errchain.core.telemetry.logfire", None)
        instrumented = span("errchain.test")
        assert instrumented is not None

    def test_instrument_errchain_requires_logfire(self, monkeypatch):
        monkeypatch.setattr("errchain.core.telemetry.logfire", None)

        with pytest.raises(ChainedError) as exc_info:
            instrument_errchain()
        assert exc_info.value.kind == Kind.INVALID
        assert exc_info.value.ops() == ["telemetry.instrument"]
        assert isinstance(exc_info.value.cause, RuntimeError)

    def test_span_uses_logfire_when_instrumented(self, monkeypatch):
        fake = FakeLogfire()
        monkeypatch.setattr("errchain.core.telemetry.logfire", fake)
        monkeypatch.setattr("errchain.core.telemetry._INSTRUMENTED", False)

        instrument_errchain()
        with span("errchain.test", answer=42):
            pass
        assert fake.spans == [("errchain.test", {"answer": 42})]


class TestLogError:
    @pytest.mark.parametrize(
        ("severity", "level"),
        [
            (Severity.INFO, logging.INFO),
            (Severity.WARN, logging.WARNING),
            (Severity.ERROR, logging.ERROR),
            (Severity.PANIC, logging.CRITICAL),
            (Severity.FATAL, logging.CRITICAL),
        ],
    )
    def test_log_level_mapping(self, severity, level):
        assert log_level(severity) == level

    def test_logs_chain_with_structured_fields(self, caplog):
        inner = new(Op("store.Put"), Kind.CONFLICT, Severity.WARN, ValueError("duplicate key"))
        err = new(Op("api.Create"), inner)

        with caplog.at_level(logging.DEBUG, logger=LOGGER):
            log_error(err)

        [record] = caplog.records
        assert record.levelno == logging.WARNING
        assert record.getMessage() == str(err)
        assert record.error_ops == ["api.Create", "store.Put"]
        assert record.error_kind == "conflict"
        assert record.error_severity == "warn"

    def test_logs_opaque_error_at_error_level(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=LOGGER):
            log_error(ValueError("boom"))

        [record] = caplog.records
        assert record.levelno == logging.ERROR
        assert record.getMessage() == "boom"
        assert record.error_ops == []
        assert record.error_kind == "other"

    def test_uses_given_logger(self, caplog):
        log = logging.getLogger("app.handlers")
        with caplog.at_level(logging.DEBUG, logger="app.handlers"):
            log_error(new(Op("handler.Serve"), Severity.INFO), log)

        [record] = caplog.records
        assert record.name == "app.handlers"
        assert record.levelno == logging.INFO

    def test_log_error_opens_span_when_instrumented(self, monkeypatch, caplog):
        fake = FakeLogfire()
        monkeypatch.setattr("errchain.core.telemetry.logfire", fake)
        monkeypatch.setattr("errchain.core.telemetry._INSTRUMENTED", True)

        with caplog.at_level(logging.DEBUG, logger=LOGGER):
            log_error(new(Op("store.Get"), Kind.NOT_FOUND, Severity.ERROR))

        assert fake.spans == [
            (
                "errchain.log_error",
                {"error_ops": ["store.Get"], "error_kind": "not_found", "error_severity": "error"},
            )
        ]

    def test_accepts_logger_keyword(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="app.jobs"):
            log_error(new(Op("job.Run"), Severity.PANIC), logger=logging.getLogger("app.jobs"))

        [record] = caplog.records
        assert record.name == "app.jobs"
        assert record.levelno == logging.CRITICAL
