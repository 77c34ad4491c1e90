"""Normalization of library-catalogue metadata into citation records.

This package provides:
- Data models (citenorm.models): citations, creators, item types
- Normalization (citenorm.normalize): item types, creators, field translators
- Engine (citenorm.engine): run configuration and orchestration
- Audit (citenorm.audit): structured JSONL event logging
- CLI (citenorm.cli): command-line interface
- Public API (citenorm.api): high-level convenience functions
"""

__version__ = "0.4.0"
__license__ = "MIT"

from citenorm.api import (
    PayloadError,
    load_payload,
    normalize_payload,
    write_json,
)
from citenorm.models import Citation, Creator, ItemType
from citenorm.normalize import normalize

__all__ = [
    "__version__",
    "__license__",
    "Citation",
    "Creator",
    "ItemType",
    "load_payload",
    "normalize_payload",
    "write_json",
    "normalize",
    "PayloadError",
]
