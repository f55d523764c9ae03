"""
Constants Package

Category ordering and validation whitelists.
"""

from .categories import (
    SECTION_ORDER,
    UNRANKED_SECTION,
    DEFAULT_CATEGORY,
    UNKNOWN_INGREDIENT,
)

from .validation import (
    DINNER,
    VIEW_MODES,
    CHECKLIST_FIELDS,
    MAX_LENGTHS,
    MAX_SERVINGS,
)

__all__ = [
    'SECTION_ORDER',
    'UNRANKED_SECTION',
    'DEFAULT_CATEGORY',
    'UNKNOWN_INGREDIENT',
    'DINNER',
    'VIEW_MODES',
    'CHECKLIST_FIELDS',
    'MAX_LENGTHS',
    'MAX_SERVINGS',
]
