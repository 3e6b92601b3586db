"""Ingredient catalog — the closed registry of everything the shop sells.

Each identifier maps to an immutable :class:`IngredientSpec` carrying its
kind and the line spoken when the layer is served.  Kind is a plain
field, so classifying an ingredient is a lookup, never type inspection.

The stock menu is baked in here; ``conectl.toml`` may register more
entries on top of it before the catalog is frozen.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from conectl.domain.errors import CatalogFrozen, DuplicateIngredient, UnknownIngredient
from conectl.domain.types import IngredientKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IngredientSpec:
    """One sellable ingredient."""

    identifier: str
    kind: IngredientKind
    message: str


class Catalog:
    """Identifier → :class:`IngredientSpec` registry.

    Populated once, then frozen.  Lookups never mutate state, so a frozen
    catalog is safe to share between orders.
    """

    def __init__(self, specs: Iterable[IngredientSpec] = ()) -> None:
        self._specs: dict[str, IngredientSpec] = {}
        self._frozen = False
        for spec in specs:
            self.register(spec)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, spec: IngredientSpec) -> None:
        """Add *spec* to the catalog.

        Raises:
            CatalogFrozen: The catalog has been frozen.
            DuplicateIngredient: The identifier is already registered.
        """
        if self._frozen:
            raise CatalogFrozen(spec.identifier)
        if spec.identifier in self._specs:
            raise DuplicateIngredient(spec.identifier)
        self._specs[spec.identifier] = spec
        logger.debug("Registered ingredient %s (%s)", spec.identifier, spec.kind)

    def freeze(self) -> Catalog:
        """Make the catalog read-only. Returns self for chaining."""
        self._frozen = True
        return self

    def lookup(self, identifier: str) -> IngredientSpec:
        """Resolve *identifier* or raise :class:`UnknownIngredient`."""
        try:
            return self._specs[identifier]
        except KeyError:
            raise UnknownIngredient(identifier) from None

    def by_kind(self, kind: IngredientKind) -> list[IngredientSpec]:
        """All specs of *kind*, in registration order."""
        return [s for s in self._specs.values() if s.kind == kind]

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._specs

    def __iter__(self) -> Iterator[IngredientSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)


# ---------------------------------------------------------------------------
# Stock menu
# ---------------------------------------------------------------------------

STOCK_MENU: tuple[IngredientSpec, ...] = (
    # Cones
    IngredientSpec(
        "WaffleCone",
        IngredientKind.BASE,
        "I've started with a nice, fresh waffle cone.",
    ),
    IngredientSpec(
        "SugarCone",
        IngredientKind.BASE,
        "I'm putting everything into a tasty sugar cone.",
    ),
    # Scoops
    IngredientSpec(
        "ScoopOfChocolate",
        IngredientKind.MIDDLE,
        "I've added a scoop of creamy chocolate ice cream.",
    ),
    IngredientSpec(
        "ScoopOfVanilla",
        IngredientKind.MIDDLE,
        "I've added a scoop of smooth vanilla ice cream.",
    ),
    IngredientSpec(
        "ScoopOfTuna",
        IngredientKind.MIDDLE,
        "I've added a scoop of tuna ice cream (bleah!).",
    ),
    # Extras
    IngredientSpec(
        "Cherries",
        IngredientKind.TOPPING,
        "I've added a pile of cherries.",
    ),
    IngredientSpec(
        "MandMs",
        IngredientKind.TOPPING,
        "I've added a bunch of M&M's.",
    ),
    IngredientSpec(
        "CandySprinkles",
        IngredientKind.TOPPING,
        "I've sprinkled on some candy sprinkles.",
    ),
)


def default_catalog() -> Catalog:
    """Frozen catalog holding only the stock menu."""
    return Catalog(STOCK_MENU).freeze()


def build_catalog(extra: Iterable[IngredientSpec] = ()) -> Catalog:
    """Stock menu plus *extra* entries, frozen.

    Raises:
        DuplicateIngredient: An extra entry reuses a registered identifier.
    """
    catalog = Catalog(STOCK_MENU)
    for spec in extra:
        catalog.register(spec)
    return catalog.freeze()
