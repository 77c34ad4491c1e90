"""xISBN response payload schema and access helpers."""

from collections.abc import Mapping
from typing import Any

import jsonschema

__all__ = ["XISBN_PAYLOAD_SCHEMA", "PayloadError", "validate_payload", "first_entry"]

_STRING_OR_LIST = {
    "anyOf": [
        {"type": "string"},
        {"type": "array", "items": {"type": "string"}},
    ]
}

XISBN_PAYLOAD_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "WorldCat xISBN getMetadata response",
    "type": "object",
    "required": ["stat"],
    "properties": {
        "stat": {"type": "string"},
        "list": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "form": _STRING_OR_LIST,
                    "author": _STRING_OR_LIST,
                    "title": _STRING_OR_LIST,
                    "year": _STRING_OR_LIST,
                    "city": _STRING_OR_LIST,
                    "publisher": _STRING_OR_LIST,
                    "lang": _STRING_OR_LIST,
                    "ed": _STRING_OR_LIST,
                    "volume": _STRING_OR_LIST,
                    "issue": _STRING_OR_LIST,
                    "isbn": _STRING_OR_LIST,
                    "url": _STRING_OR_LIST,
                    "oclcnum": _STRING_OR_LIST,
                    "lccn": _STRING_OR_LIST,
                },
            },
        },
    },
}


class PayloadError(Exception):
    """Raised when a metadata payload cannot be used."""

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize payload error.

        Parameters
        ----------
        message : str
            Error message.
        path : str | None, optional
            JSON path of the offending value, if known.
        """
        super().__init__(message)
        self.path = path


def validate_payload(payload: Any) -> None:
    """Validate an xISBN response against ``XISBN_PAYLOAD_SCHEMA``.

    Parameters
    ----------
    payload : Any
        Decoded JSON response.

    Raises
    ------
    PayloadError
        If the payload does not conform to the schema.
    """
    try:
        jsonschema.validate(instance=payload, schema=XISBN_PAYLOAD_SCHEMA)
    except jsonschema.ValidationError as e:
        path = "/".join(str(p) for p in e.absolute_path) or None
        raise PayloadError(f"Invalid xISBN payload: {e.message}", path=path) from e


def first_entry(payload: Any) -> Mapping[str, Any] | None:
    """Return the first record of a successful xISBN response.

    Returns None unless ``stat`` is ``"ok"`` and ``list`` holds at least
    one object.
    """
    if not isinstance(payload, Mapping) or payload.get("stat") != "ok":
        return None
    entries = payload.get("list")
    if not isinstance(entries, list) or not entries:
        return None
    entry = entries[0]
    return entry if isinstance(entry, Mapping) else None
