"""Tests for audit logger module."""

import json
import re
from pathlib import Path

import pytest

from citenorm.audit.logger import AuditLogger, new_run_id


@pytest.fixture
def logger(tmp_path: Path) -> AuditLogger:
    """Create a logger that auto-closes after test."""
    lg = AuditLogger(run_id="test_run", log_path=tmp_path / "events.jsonl")
    yield lg
    lg.close()


def _read_events(path: Path) -> list[dict]:
    """Read all JSONL events from file."""
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


@pytest.mark.unit
def test_new_run_id_format() -> None:
    """Test run IDs combine a UTC timestamp and a random suffix."""
    run_id = new_run_id()

    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T[\d:.]+Z__[0-9a-f]{8}", run_id)
    assert new_run_id() != run_id


@pytest.mark.unit
def test_logger_init_creates_file(logger: AuditLogger) -> None:
    """Test logger creates the log file and sets initial state."""
    assert logger.log_path.exists()
    assert logger.current_stage is None
    assert logger.run_id == "test_run"


@pytest.mark.unit
def test_logger_creates_parent_directories(tmp_path: Path) -> None:
    """Test missing parent directories are created."""
    log_path = tmp_path / "nested" / "dir" / "events.jsonl"

    with AuditLogger("test_run", log_path):
        pass

    assert log_path.exists()


@pytest.mark.unit
def test_logger_event_writes_valid_jsonl(logger: AuditLogger) -> None:
    """Test event() writes a valid JSONL line with correct envelope."""
    logger.event("test_event", data={"key": "value"}, level="INFO", citation_id="isbn:1")

    events = _read_events(logger.log_path)

    assert len(events) == 1
    evt = events[0]
    assert evt["run_id"] == "test_run"
    assert evt["event"] == "test_event"
    assert evt["level"] == "INFO"
    assert evt["data"] == {"key": "value"}
    assert evt["citation_id"] == "isbn:1"
    assert evt["ts"].endswith("Z")


@pytest.mark.unit
def test_logger_stage_context_inheritance(logger: AuditLogger) -> None:
    """Test stage set via set_stage propagates to events."""
    logger.set_stage("normalize")
    logger.event("ev1")
    logger.event("ev2", stage="override")
    logger.set_stage(None)
    logger.event("ev3")

    events = _read_events(logger.log_path)

    assert events[0]["stage"] == "normalize"
    assert events[1]["stage"] == "override"
    assert events[2]["stage"] is None


@pytest.mark.unit
@pytest.mark.parametrize(
    ("method", "kwargs", "expected_event", "expected_level"),
    [
        ("run_started", {"command": ["citenorm"], "parameters": {"k": 1}}, "run_started", "INFO"),
        ("run_finished", {"status": "success", "duration_seconds": 1.5}, "run_finished", "INFO"),
        (
            "item_type_resolved",
            {"citation_id": "isbn:1", "item_type": "book", "form_codes": ["BC"]},
            "item_type_resolved",
            "INFO",
        ),
        (
            "field_translated",
            {"citation_id": "isbn:1", "source_field": "year", "target_field": "date"},
            "field_translated",
            "DEBUG",
        ),
        (
            "translator_failed",
            {
                "citation_id": "isbn:1",
                "source_field": "year",
                "exception_class": "ValueError",
                "message": "bad",
            },
            "translator_failed",
            "WARN",
        ),
        (
            "payload_rejected",
            {"citation_id": "isbn:1", "reason": "No results", "response_code": 404},
            "payload_rejected",
            "ERROR",
        ),
    ],
)
def test_logger_convenience_methods(
    logger: AuditLogger,
    method: str,
    kwargs: dict,
    expected_event: str,
    expected_level: str,
) -> None:
    """Test each convenience method writes the right event and level."""
    getattr(logger, method)(**kwargs)

    evt = _read_events(logger.log_path)[0]

    assert evt["event"] == expected_event
    assert evt["level"] == expected_level
    if "citation_id" in kwargs:
        assert evt["citation_id"] == kwargs["citation_id"]


@pytest.mark.unit
def test_logger_appends_across_instances(tmp_path: Path) -> None:
    """Test reopening a log appends instead of truncating."""
    log_path = tmp_path / "events.jsonl"

    with AuditLogger("run_a", log_path) as lg:
        lg.event("first")
    with AuditLogger("run_b", log_path) as lg:
        lg.event("second")

    assert [e["run_id"] for e in _read_events(log_path)] == ["run_a", "run_b"]


@pytest.mark.unit
def test_logger_min_level_filters_events(tmp_path: Path) -> None:
    """Test events below the minimum level are not written."""
    log_path = tmp_path / "events.jsonl"

    with AuditLogger("test_run", log_path, min_level="INFO") as lg:
        lg.field_translated("isbn:1", "year", "date")
        lg.item_type_resolved("isbn:1", "book", ["BC"])
        lg.payload_rejected("isbn:1", "No results", 404)

    assert [e["event"] for e in _read_events(log_path)] == [
        "item_type_resolved",
        "payload_rejected",
    ]
    assert not lg.enabled("DEBUG")
    assert lg.enabled("ERROR")


@pytest.mark.unit
def test_logger_rejects_unknown_level(tmp_path: Path) -> None:
    """Test an unknown minimum level raises before the file is opened."""
    with pytest.raises(ValueError, match="Unknown log level"):
        AuditLogger("test_run", tmp_path / "events.jsonl", min_level="TRACE")

    assert not (tmp_path / "events.jsonl").exists()


@pytest.mark.unit
def test_logger_close_is_idempotent(logger: AuditLogger) -> None:
    """Test close() may be called more than once."""
    logger.close()
    logger.close()
