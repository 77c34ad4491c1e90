"""Structured JSONL audit logging for normalization runs."""

from citenorm.audit.logger import LEVELS, AuditLogger, new_run_id
from citenorm.audit.models import LogEvent

__all__ = ["LEVELS", "AuditLogger", "LogEvent", "new_run_id"]
