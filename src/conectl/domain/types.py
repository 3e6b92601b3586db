"""Ingredient kinds and their sort weights.

The kind set is closed: every ingredient is a cone (base), a scoop
(middle), or an extra (topping).
"""

from __future__ import annotations

from enum import StrEnum


class IngredientKind(StrEnum):
    """Layer an ingredient occupies on a cone."""

    BASE = "base"
    MIDDLE = "middle"
    TOPPING = "topping"

    @property
    def weight(self) -> int:
        """Sort weight: lower weights sit closer to the hand."""
        return KIND_WEIGHTS[self]


KIND_WEIGHTS: dict[IngredientKind, int] = {
    IngredientKind.BASE: 1,
    IngredientKind.MIDDLE: 2,
    IngredientKind.TOPPING: 3,
}
