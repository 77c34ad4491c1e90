"""Item type resolution from WorldCat form codes."""

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from citenorm.models.item_types import DEFAULT_ITEM_TYPE, ItemType

__all__ = [
    "BOOK_FORM_CODES",
    "FORM_CODE_TYPES",
    "form_codes_of",
    "resolve_item_type",
    "return_item_type",
]

# Form codes that make an item a book wherever they appear in the list
BOOK_FORM_CODES = frozenset({"BA", "BB", "BC"})

FORM_CODE_TYPES: Mapping[str, ItemType] = MappingProxyType(
    {
        "AA": ItemType.AUDIO_RECORDING,  # might be an audiobook
        "DA": ItemType.BOOK,  # digital, most likely an ebook
        "FA": ItemType.DOCUMENT,  # film or transparency
        "MA": ItemType.NEWSPAPER_ARTICLE,  # microfiche
        "VA": ItemType.VIDEO_RECORDING,
    }
)


def resolve_item_type(form_codes: Sequence[str] | None) -> ItemType:
    """Resolve the canonical item type from an ordered list of form codes.

    A book code anywhere in the list wins. Otherwise the last recognized
    code determines the type; unrecognized codes are ignored.

    Parameters
    ----------
    form_codes : Sequence[str] | None
        Two-letter WorldCat form codes, in source order.

    Returns
    -------
    ItemType
        Resolved item type, ``book`` when nothing is recognized.

    Examples
    --------
    >>> resolve_item_type(["BC", "AA"])
    <ItemType.BOOK: 'book'>
    >>> resolve_item_type(["MA", "AA"])
    <ItemType.AUDIO_RECORDING: 'audioRecording'>
    """
    if not form_codes:
        return DEFAULT_ITEM_TYPE

    candidate: ItemType | None = None
    for code in form_codes:
        if not isinstance(code, str):
            continue
        if code in BOOK_FORM_CODES:
            return ItemType.BOOK
        if code in FORM_CODE_TYPES:
            candidate = FORM_CODE_TYPES[code]

    return candidate or DEFAULT_ITEM_TYPE


def return_item_type(payload: Mapping[str, Any] | None) -> ItemType:
    """Resolve the item type of the first entry of an xISBN payload.

    Parameters
    ----------
    payload : Mapping[str, Any] | None
        Full xISBN response (``{"stat": ..., "list": [...]}``).

    Returns
    -------
    ItemType
        Item type of ``payload["list"][0]``; ``book`` if any level is missing.
    """
    if not isinstance(payload, Mapping):
        return DEFAULT_ITEM_TYPE

    entries = payload.get("list")
    if not isinstance(entries, list) or not entries or not isinstance(entries[0], Mapping):
        return DEFAULT_ITEM_TYPE

    return resolve_item_type(form_codes_of(entries[0]))


def form_codes_of(entry: Mapping[str, Any] | None) -> list[str] | None:
    """Return the form-code list of a single xISBN entry, if well formed."""
    if not isinstance(entry, Mapping):
        return None
    codes = entry.get("form")
    if isinstance(codes, str):
        return [codes]
    if isinstance(codes, list):
        return [code for code in codes if isinstance(code, str)]
    return None
