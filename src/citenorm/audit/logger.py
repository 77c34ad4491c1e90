"""JSONL audit trail for normalization runs.

Every event is one JSON object on its own line (see ``LogEvent`` and
``schemas/log_event.schema.json``). Events below the logger's minimum level
are dropped before they reach the file.
"""

import json
import secrets
from dataclasses import asdict
from pathlib import Path
from typing import Any

from citenorm.audit.models import LogEvent
from citenorm.utils import get_iso_timestamp

__all__ = ["LEVELS", "AuditLogger", "new_run_id"]

# Severity order, lowest first
LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


def new_run_id() -> str:
    """Generate unique run identifier.

    Returns
    -------
    str
        Run ID in format: ISO8601_timestamp__random_suffix.
    """
    return f"{get_iso_timestamp()}__{secrets.token_hex(4)}"


class AuditLogger:
    """Append-only JSONL event writer for one normalization run.

    The file is opened once and flushed after every event, so a crashed
    run still leaves a readable trail.

    Attributes
    ----------
    run_id : str
        Identifier shared by every event of the run.
    log_path : Path
        JSONL file events are appended to.
    min_level : str
        Events below this level are not written.
    current_stage : str | None
        Stage attached to events that do not name one.
    """

    def __init__(self, run_id: str, log_path: Path | str, min_level: str = "DEBUG") -> None:
        """Open ``log_path`` for appending, creating parent directories.

        Raises
        ------
        ValueError
            If ``min_level`` is not one of ``LEVELS``.
        """
        if min_level not in LEVELS:
            raise ValueError(f"Unknown log level: {min_level!r}. Expected one of {LEVELS}")

        self.run_id = run_id
        self.log_path = Path(log_path)
        self.min_level = min_level
        self.current_stage: str | None = None

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Flush and close the log file; safe to call twice."""
        if self._file.closed:
            return
        self._file.flush()
        self._file.close()

    def set_stage(self, stage: str | None) -> None:
        """Set the stage recorded on subsequent events."""
        self.current_stage = stage

    def enabled(self, level: str) -> bool:
        """Return True if events at ``level`` are written."""
        return LEVELS.index(level) >= LEVELS.index(self.min_level)

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        stage: str | None = None,
        citation_id: str | None = None,
    ) -> None:
        """Write one event.

        Parameters
        ----------
        event_type : str
            Event name (e.g., "item_type_resolved").
        data : dict[str, Any] | None, optional
            Event payload.
        level : str, optional
            One of ``LEVELS``, by default "INFO".
        stage : str | None, optional
            Overrides ``current_stage`` for this event.
        citation_id : str | None, optional
            ``Citation.citation_id`` of the citation the event concerns.
        """
        if not self.enabled(level):
            return

        record = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data or {},
            stage=stage if stage is not None else self.current_stage,
            citation_id=citation_id,
        )
        self._file.write(json.dumps(asdict(record), ensure_ascii=False, separators=(",", ":")))
        self._file.write("\n")
        self._file.flush()

    def _emit(self, event_type: str, level: str, citation_id: str | None, **data: Any) -> None:
        self.event(event_type, data=data, level=level, citation_id=citation_id)

    # Run lifecycle

    def run_started(self, command: list[str], parameters: dict[str, Any]) -> None:
        """Record the command line and configuration of the run."""
        self._emit("run_started", "INFO", None, command=command, parameters=parameters)

    def run_finished(self, status: str, duration_seconds: float) -> None:
        """Record the outcome ("success" or "failed") and wall time of the run."""
        self._emit(
            "run_finished", "INFO", None, status=status, duration_seconds=duration_seconds
        )

    # Per-citation events

    def item_type_resolved(
        self, citation_id: str, item_type: str, form_codes: list[str] | None
    ) -> None:
        self._emit(
            "item_type_resolved", "INFO", citation_id, item_type=item_type, form_codes=form_codes
        )

    def field_translated(self, citation_id: str, source_field: str, target_field: str) -> None:
        self._emit(
            "field_translated",
            "DEBUG",
            citation_id,
            source_field=source_field,
            target_field=target_field,
        )

    def translator_failed(
        self,
        citation_id: str,
        source_field: str,
        exception_class: str,
        message: str,
    ) -> None:
        """Record a translator that raised; its target field stays unset."""
        self._emit(
            "translator_failed",
            "WARN",
            citation_id,
            source_field=source_field,
            exception_class=exception_class,
            message=message,
        )

    def payload_rejected(self, citation_id: str, reason: str, response_code: int) -> None:
        """Record an upstream payload that produced no citation content."""
        self._emit(
            "payload_rejected",
            "ERROR",
            citation_id,
            reason=reason,
            response_code=response_code,
        )
