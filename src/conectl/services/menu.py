"""MenuService — list what the catalog sells."""

from __future__ import annotations

from conectl.domain.types import IngredientKind
from conectl.services.base import BaseService
from conectl.services.result import ServiceResult
from conectl.services.telemetry import traced


class MenuService(BaseService):
    """Read-only view over the catalog."""

    @traced
    def list_menu(self, kind: IngredientKind | str | None = None) -> ServiceResult:
        """List catalog entries, cones first, optionally for one *kind*."""
        kinds = [IngredientKind(kind)] if kind else list(IngredientKind)
        items = [
            {"id": spec.identifier, "kind": str(spec.kind), "message": spec.message}
            for k in sorted(kinds, key=lambda k: k.weight)
            for spec in self._catalog.by_kind(k)
        ]
        return ServiceResult(
            ok=True,
            op="menu",
            data={"shop": self._shop.name, "items": items, "count": len(items)},
        )
