"""Audit event envelope."""

from dataclasses import dataclass
from typing import Any

__all__ = ["LogEvent"]


@dataclass
class LogEvent:
    """One line of the JSONL audit trail.

    Attributes
    ----------
    ts : str
        UTC timestamp, ISO8601 with ``Z`` suffix.
    run_id : str
        Run the event belongs to.
    level : str
        "DEBUG", "INFO", "WARN" or "ERROR".
    event : str
        Event name, e.g. "field_translated".
    data : dict[str, Any]
        Event-specific payload.
    stage : str | None
        Pipeline stage active when the event was written.
    citation_id : str | None
        ``"<id_type>:<id_value>"`` of the citation concerned, if any.
    """

    ts: str
    run_id: str
    level: str
    event: str
    data: dict[str, Any]
    stage: str | None = None
    citation_id: str | None = None
