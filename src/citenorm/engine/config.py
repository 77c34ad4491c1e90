"""Normalization configuration dataclass."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from citenorm.audit.logger import LEVELS


@dataclass
class NormalizationConfig:
    """Configuration for a normalization run.

    Attributes
    ----------
    source_tag : str
        Provenance tag appended to ``citation.source`` after a successful pass.
    validate_payload : bool
        Validate the raw payload against the xISBN JSON schema first.
    log_path : Path | None
        JSONL audit log path. If None, no events are written.
    log_level : str
        Minimum level of audit events written to ``log_path``.
    """

    source_tag: str = "WorldCat"
    validate_payload: bool = True
    log_path: Path | None = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate and coerce fields."""
        if not self.source_tag or not self.source_tag.strip():
            raise ValueError("source_tag must be a non-empty string")

        if self.log_level not in LEVELS:
            raise ValueError(f"log_level must be one of {LEVELS}, got {self.log_level!r}")

        if self.log_path is not None:
            self.log_path = Path(self.log_path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["log_path"] = str(self.log_path) if self.log_path is not None else None
        return data
