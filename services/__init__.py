"""
Services Package

Business logic modules for the meal planner's shopping list.
"""

from .errors import (
    ShoppingListError,
    NotFound,
    ReferentialGap,
    ValidationError,
    PersistenceFailure,
)

from .records import (
    RecipeRecord,
    RecipeItemRecord,
    DinnerEntry,
    ManualItemRecord,
    CheckState,
    ChecklistOverlay,
    IngredientRow,
    ManualRow,
)

from .shopping import (
    scale_servings,
    aggregate_ingredients,
    assemble_rows,
    compute_shopping_list,
)

from .checklist import (
    ChecklistStateStore,
    ChecklistCache,
    validate_patch,
)

from .repository import ShoppingRepository

from .presenter import (
    format_qty,
    qty_text,
    make_section_rank,
    sort_rows,
    group_rows,
)

__all__ = [
    # Errors
    'ShoppingListError',
    'NotFound',
    'ReferentialGap',
    'ValidationError',
    'PersistenceFailure',
    # Records
    'RecipeRecord',
    'RecipeItemRecord',
    'DinnerEntry',
    'ManualItemRecord',
    'CheckState',
    'ChecklistOverlay',
    'IngredientRow',
    'ManualRow',
    # Aggregation
    'scale_servings',
    'aggregate_ingredients',
    'assemble_rows',
    'compute_shopping_list',
    # Checklist
    'ChecklistStateStore',
    'ChecklistCache',
    'validate_patch',
    # Data access
    'ShoppingRepository',
    # Presentation
    'format_qty',
    'qty_text',
    'make_section_rank',
    'sort_rows',
    'group_rows',
]
