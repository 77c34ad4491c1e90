"""Normalization of xISBN records into citation content.

This module orchestrates item-type resolution, translator-table lookup,
and per-field translation. ``normalize`` never raises for missing or
malformed fields: absent or invalid data leaves the corresponding target
field unset.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from citenorm.models.citation import Citation

from .item_type import form_codes_of, resolve_item_type
from .tables import find_entry, get_table
from .translators import translate_field

if TYPE_CHECKING:
    from citenorm.audit.logger import AuditLogger


def normalize(
    citation: Citation,
    raw_record: Mapping[str, Any] | None,
    *,
    logger: "AuditLogger | None" = None,
) -> Citation:
    """Populate a citation from a single xISBN record.

    Parameters
    ----------
    citation : Citation
        Citation under construction; mutated in place.
    raw_record : Mapping[str, Any] | None
        One entry of an xISBN response (``payload["list"][0]``).
    logger : AuditLogger | None, optional
        Audit logger receiving per-field events.

    Returns
    -------
    Citation
        The same citation, with ``item_type`` set, ``content`` populated
        and ``response_code`` set to 200.

    Notes
    -----
    Target fields that already hold a value are never overwritten, so
    running this function twice with the same record leaves ``content``
    unchanged (creators are not duplicated).
    """
    record: Mapping[str, Any] = raw_record if isinstance(raw_record, Mapping) else {}

    # Don't overwrite an item type chosen by the caller
    if citation.item_type is None:
        form_codes = form_codes_of(record)
        citation.item_type = resolve_item_type(form_codes)
        if logger is not None:
            logger.item_type_resolved(citation.citation_id, str(citation.item_type), form_codes)

    table = get_table(citation.item_type)

    for source_field, value in record.items():
        entry = find_entry(table, source_field)
        if entry is None:
            continue
        if citation.content.get(entry.target_field):
            continue

        try:
            translate_field(entry, citation, value)
        except Exception as e:
            if logger is not None:
                logger.translator_failed(
                    citation.citation_id, source_field, type(e).__name__, str(e)
                )
            continue

        if logger is not None and citation.content.get(entry.target_field):
            logger.field_translated(citation.citation_id, source_field, entry.target_field)

    citation.response_code = 200
    return citation
