"""
Shopping List Records

Plain data passed between the repository, the aggregation engine and the
presenter. Nothing here touches the database.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import ClassVar, Dict, Optional, Tuple


@dataclass(frozen=True)
class RecipeRecord:
    id: int
    servings_default: Optional[int] = None


@dataclass(frozen=True)
class RecipeItemRecord:
    recipe_id: int
    ingredient_id: int
    qty: float
    unit: str
    ingredient_name: Optional[str] = None
    ingredient_category: Optional[str] = None


@dataclass(frozen=True)
class DinnerEntry:
    entry_date: date
    recipe_id: Optional[int]
    servings_override: Optional[int] = None


@dataclass(frozen=True)
class ManualItemRecord:
    id: int
    name: str
    category: Optional[str] = None
    qty: Optional[float] = None
    unit: Optional[str] = None
    carry_forward: bool = False


@dataclass(frozen=True)
class CheckState:
    in_cupboard: bool = False
    in_trolley: bool = False


UNTICKED = CheckState()


@dataclass
class ChecklistOverlay:
    """Stored ticks for one plan week. Missing keys read as unticked."""
    ingredient_states: Dict[Tuple[int, str], CheckState] = field(default_factory=dict)
    manual_states: Dict[int, CheckState] = field(default_factory=dict)

    def for_ingredient(self, ingredient_id, unit):
        return self.ingredient_states.get((ingredient_id, unit or ''), UNTICKED)

    def for_manual(self, manual_item_id):
        return self.manual_states.get(manual_item_id, UNTICKED)

    def is_empty(self):
        return not self.ingredient_states and not self.manual_states


@dataclass(frozen=True)
class IngredientRow:
    """Aggregated recipe-derived row, one per (ingredient, unit)."""
    kind: ClassVar[str] = 'ingredient'

    ingredient_id: int
    name: str
    category: str
    unit: str
    total_qty: float
    in_cupboard: bool = False
    in_trolley: bool = False

    @property
    def key(self):
        return (self.kind, self.ingredient_id, self.unit)

    @property
    def qty(self):
        return self.total_qty

    def to_dict(self):
        return {
            'kind': self.kind,
            'ingredient_id': self.ingredient_id,
            'name': self.name,
            'category': self.category,
            'unit': self.unit,
            'total_qty': self.total_qty,
            'in_cupboard': self.in_cupboard,
            'in_trolley': self.in_trolley,
        }


@dataclass(frozen=True)
class ManualRow:
    """Row for a manual item; never merged with ingredient rows."""
    kind: ClassVar[str] = 'manual'

    manual_item_id: int
    name: str
    category: str
    unit: str
    qty: Optional[float]
    in_cupboard: bool = False
    in_trolley: bool = False

    @property
    def key(self):
        return (self.kind, self.manual_item_id)

    def to_dict(self):
        return {
            'kind': self.kind,
            'manual_item_id': self.manual_item_id,
            'name': self.name,
            'category': self.category,
            'unit': self.unit,
            'qty': self.qty,
            'in_cupboard': self.in_cupboard,
            'in_trolley': self.in_trolley,
        }
