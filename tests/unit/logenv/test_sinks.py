"""Tests for the reference sinks and attribute binding."""

from __future__ import annotations

import datetime as dt
import io
import json

from logenv import StructuredLogger
from logenv.levels import DEBUG, ERROR, INFO, WARN
from logenv.records import build_record, merge_attributes, nest_attributes
from logenv.sinks import InMemorySink, StdoutSink


def test_record_payload_shape():
    record = build_record(
        WARN + 2,
        "hello",
        caller="app/models.save",
        attributes={"user": "u-1"},
        time=dt.datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=dt.timezone.utc),
    )

    assert record.to_payload() == {
        "ts": "2024-01-02T03:04:05.678Z",
        "level": "WARN+2",
        "message": "hello",
        "caller": "app/models.save",
        "user": "u-1",
    }


def test_nest_and_merge_attributes():
    nested = nest_attributes(("http", "request"), {"method": "GET"})

    assert nested == {"http": {"request": {"method": "GET"}}}
    assert merge_attributes({"http": {"status": 200}}, nested) == {
        "http": {"status": 200, "request": {"method": "GET"}}
    }


def test_in_memory_sink_level_gate():
    sink = InMemorySink(level=WARN)

    assert sink.enabled(ERROR) is True
    assert sink.enabled(INFO) is False


def test_in_memory_sink_binds_attributes_and_groups(memory_sink):
    derived = memory_sink.with_attributes({"service": "api"}).with_group("http")
    derived = derived.with_attributes({"route": "/health"})

    derived.handle(build_record(INFO, "request", attributes={"status": 200}))

    record = memory_sink.records[0]
    assert record["service"] == "api"
    assert record["http"] == {"route": "/health", "status": 200}
    assert memory_sink.with_group("") is memory_sink


def test_derived_memory_sinks_share_records(memory_sink):
    derived = memory_sink.with_attributes({"a": 1})

    derived.handle(build_record(INFO, "one"))
    memory_sink.handle(build_record(INFO, "two"))

    assert memory_sink.messages == ["one", "two"]
    assert "a" not in memory_sink.records[1]


def test_stdout_sink_emits_json_lines():
    stream = io.StringIO()
    sink = StdoutSink(stream).with_attributes({"component": "unit"})

    sink.handle(build_record(ERROR, "stdout-test", attributes={"count": 3}))

    parsed = json.loads(stream.getvalue().splitlines()[0])
    assert parsed["message"] == "stdout-test"
    assert parsed["component"] == "unit"
    assert parsed["count"] == 3
    assert parsed["level"] == parsed["severity"] == "ERROR"


def test_stdout_sink_level_gate():
    sink = StdoutSink(io.StringIO(), level=INFO)

    assert sink.enabled(DEBUG) is False
    assert sink.enabled(INFO) is True


def test_logger_bind_and_group(memory_sink):
    logger = StructuredLogger(memory_sink).bind(tenant="acme").group("job")

    logger.info("started", attempt=1)

    record = memory_sink.records[0]
    assert record["tenant"] == "acme"
    assert record["job"] == {"attempt": 1}


def test_logger_skips_disabled_levels():
    sink = InMemorySink(level=ERROR)
    logger = StructuredLogger(sink)

    logger.warning("skipped")
    logger.critical("kept")

    assert sink.messages == ["kept"]
    assert logger.enabled(WARN) is False


def test_reserved_attribute_names_do_not_replace_record_fields(memory_sink):
    record = build_record(
        INFO,
        "real message",
        caller="app/models.save",
        attributes={"level": "fake", "ts": "yesterday", "caller": "spoofed", "user": "u-1"},
    )

    payload = record.to_payload()
    assert payload["level"] == "INFO"
    assert payload["caller"] == "app/models.save"
    assert payload["fields"] == {"level": "fake", "ts": "yesterday", "caller": "spoofed"}
    assert payload["user"] == "u-1"

    memory_sink.with_attributes({"message": "bound"}).handle(record)

    stored = memory_sink.records[0]
    assert stored["message"] == "real message"
    assert stored["level"] == "INFO"
    assert stored["fields"] == {
        "message": "bound",
        "level": "fake",
        "ts": "yesterday",
        "caller": "spoofed",
    }


def test_grouped_reserved_names_stay_nested(memory_sink):
    memory_sink.with_group("http").handle(build_record(INFO, "req", attributes={"level": 3}))

    assert memory_sink.records[0]["http"] == {"level": 3}
    assert memory_sink.records[0]["level"] == "INFO"
