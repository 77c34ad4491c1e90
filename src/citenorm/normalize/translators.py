"""Field translators.

A translator entry is declarative configuration: which source field feeds
which target field, with what cardinality, and through which fixer. The
``translate_field`` function executes an entry against a citation.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from citenorm.models.citation import Citation

from ._helpers import clean_text
from .creators import DEFAULT_ROLE, add_creators_with_role_classification
from .fixers import Fixer

__all__ = [
    "CREATORS_FIELD",
    "Cardinality",
    "TranslatorEntry",
    "make_translator",
    "make_list_translator",
    "make_creators_translator",
    "translate_field",
]

CREATORS_FIELD = "creators"


class Cardinality(StrEnum):
    """How a source value is stored in its target field."""

    SCALAR = "scalar"
    LIST = "list"
    CREATORS = "creators"


@dataclass(frozen=True)
class TranslatorEntry:
    """Mapping of one source field to one target field.

    Attributes
    ----------
    source_field : str
        Field name in the source payload (e.g., 'year').
    target_field : str
        Field name in the target schema (e.g., 'date').
    cardinality : Cardinality
        Scalar, list, or creators.
    fixer : Fixer | None
        Value normalizer; returning None omits the value.
    role_tag : str | None
        Default creator role (creator entries only).
    """

    source_field: str
    target_field: str
    cardinality: Cardinality = Cardinality.SCALAR
    fixer: Fixer | None = None
    role_tag: str | None = None


def make_translator(source_field: str, target_field: str, fixer: Fixer | None = None) -> TranslatorEntry:
    """Create a scalar translator entry."""
    return TranslatorEntry(source_field, target_field, Cardinality.SCALAR, fixer)


def make_list_translator(
    source_field: str, target_field: str, fixer: Fixer | None = None
) -> TranslatorEntry:
    """Create a list translator entry (per-element fixer)."""
    return TranslatorEntry(source_field, target_field, Cardinality.LIST, fixer)


def make_creators_translator(source_field: str, role_tag: str = DEFAULT_ROLE) -> TranslatorEntry:
    """Create a creators translator entry with a default role."""
    return TranslatorEntry(source_field, CREATORS_FIELD, Cardinality.CREATORS, role_tag=role_tag)


def translate_field(
    entry: TranslatorEntry,
    citation: Citation,
    value: Any,
) -> Citation:
    """Apply one translator entry to a source value.

    Parameters
    ----------
    entry : TranslatorEntry
        Translator configuration.
    citation : Citation
        Citation whose content is populated in place.
    value : Any
        Raw source value for ``entry.source_field``. Creator entries only
        accept statement strings; any other value adds no creators.

    Returns
    -------
    Citation
        The same citation.
    """
    if entry.cardinality is Cardinality.CREATORS:
        return add_creators_with_role_classification(
            citation, value, entry.role_tag or DEFAULT_ROLE
        )

    if entry.cardinality is Cardinality.LIST:
        return _translate_list(entry, citation, value)

    return _translate_scalar(entry, citation, value)


def _fix(entry: TranslatorEntry, value: Any) -> str | None:
    """Clean and fix a single value; None means omit."""
    if not isinstance(value, str):
        return None
    cleaned = clean_text(value, entry.target_field)
    if not cleaned:
        return None
    if entry.fixer is None:
        return cleaned
    return entry.fixer(cleaned)


def _translate_scalar(entry: TranslatorEntry, citation: Citation, value: Any) -> Citation:
    # Lists contribute their first value only
    if isinstance(value, list):
        value = value[0] if value else None

    fixed = _fix(entry, value)
    if fixed:
        citation.content[entry.target_field] = fixed
    return citation


def _translate_list(entry: TranslatorEntry, citation: Citation, value: Any) -> Citation:
    values = [value] if isinstance(value, str) else value
    if not isinstance(values, list):
        return citation

    accepted = [fixed for fixed in (_fix(entry, v) for v in values) if fixed]
    if not accepted:
        return citation

    existing = citation.content.setdefault(entry.target_field, [])
    for fixed in accepted:
        if fixed not in existing:
            existing.append(fixed)
    return citation
