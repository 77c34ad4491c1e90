"""Metadata normalization engine.

Main entry points:
- normalize: populate a citation from one xISBN record
- resolve_item_type / return_item_type: item type from WorldCat form codes
- add_creators_with_role_classification: parse statements of responsibility
- TRANSLATOR_TABLES / get_table: per-item-type field translators
"""

from citenorm.normalize.creators import (
    add_creators,
    add_creators_with_role_classification,
    extract_names,
    generate_creator_obj,
    split_natural_name,
)
from citenorm.normalize.fixers import fix_date, fix_lang, validate_isbn
from citenorm.normalize.item_type import (
    BOOK_FORM_CODES,
    FORM_CODE_TYPES,
    resolve_item_type,
    return_item_type,
)
from citenorm.normalize.normalizer import normalize
from citenorm.normalize.payload import PayloadError, first_entry, validate_payload
from citenorm.normalize.tables import TRANSLATOR_TABLES, get_table
from citenorm.normalize.translators import (
    Cardinality,
    TranslatorEntry,
    make_creators_translator,
    make_list_translator,
    make_translator,
    translate_field,
)

__all__ = [
    "normalize",
    # Item types
    "BOOK_FORM_CODES",
    "FORM_CODE_TYPES",
    "resolve_item_type",
    "return_item_type",
    # Creators
    "extract_names",
    "generate_creator_obj",
    "split_natural_name",
    "add_creators",
    "add_creators_with_role_classification",
    # Fixers
    "fix_date",
    "fix_lang",
    "validate_isbn",
    # Translators
    "Cardinality",
    "TranslatorEntry",
    "make_translator",
    "make_list_translator",
    "make_creators_translator",
    "translate_field",
    "TRANSLATOR_TABLES",
    "get_table",
    # Payloads
    "PayloadError",
    "first_entry",
    "validate_payload",
]
