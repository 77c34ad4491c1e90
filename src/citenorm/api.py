"""Public API for normalizing xISBN payloads.

This module provides the main public API for citenorm, enabling:
- Loading xISBN payloads from JSON files
- Normalizing payloads into Citation objects
- Exporting citations to JSON
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from citenorm.engine.config import NormalizationConfig
from citenorm.engine.runner import run_normalization
from citenorm.models import Citation
from citenorm.normalize.payload import PayloadError

__all__ = [
    "load_payload",
    "normalize_payload",
    "write_json",
    "PayloadError",
]


def load_payload(path: str | Path) -> Any:
    """Load an xISBN payload from a JSON file.

    Parameters
    ----------
    path : str | Path
        Path to JSON file.

    Returns
    -------
    Any
        Decoded JSON document.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    PayloadError
        If the file is not valid JSON.
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        with file_path.open(encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise PayloadError(f"Failed to decode {file_path.name}: {e.msg}", path=str(file_path)) from e


def normalize_payload(
    payload: Any,
    id_type: str = "isbn",
    id_value: str = "",
    *,
    log_path: str | Path | None = None,
    log_level: str = "INFO",
) -> Citation:
    """Normalize an xISBN payload into a citation.

    Parameters
    ----------
    payload : Any
        Decoded xISBN JSON response.
    id_type : str, optional
        Requested identifier kind, by default 'isbn'.
    id_value : str, optional
        Requested identifier value.
    log_path : str | Path | None, optional
        JSONL audit log path.
    log_level : str, optional
        Minimum audit event level written to ``log_path``, by default "INFO".

    Returns
    -------
    Citation
        Normalized citation; check ``citation.error`` for failures.

    Examples
    --------
        >>> from citenorm import load_payload, normalize_payload
        >>> citation = normalize_payload(load_payload("xisbn.json"), "isbn", "9780596519797")
        >>> citation.content["title"]
        'MediaWiki'
    """
    config = NormalizationConfig(
        log_path=Path(log_path) if log_path is not None else None,
        log_level=log_level,
    )
    return run_normalization(payload, id_type, id_value, config=config)


def write_json(citations: Iterable[Citation], output_path: str | Path) -> None:
    """Write citations as a JSON array.

    Parameters
    ----------
    citations : Iterable[Citation]
        Citations to export.
    output_path : str | Path
        Output file path. Parent directories are created if needed.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8") as f:
        json.dump([c.to_dict() for c in citations], f, ensure_ascii=False, indent=2)
        f.write("\n")
