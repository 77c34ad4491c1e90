"""Shared data types for citenorm.

This package contains the citation record, creator values, and the
item-type taxonomy consumed across the normalization engine.
"""

from citenorm.models.citation import ID_TYPES, Citation, Creator
from citenorm.models.item_types import DEFAULT_ITEM_TYPE, ItemType

__all__ = [
    # Records
    "Citation",
    "Creator",
    "ID_TYPES",
    # Item types
    "ItemType",
    "DEFAULT_ITEM_TYPE",
]
