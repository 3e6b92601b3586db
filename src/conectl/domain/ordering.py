"""Ordering engine — put an order's ingredients in assembly order.

Customers name ingredients in any order ("chocolate on a sugar cone with
sprinkles").  Assembly always goes cone, then scoops, then extras.
Python's ``sorted`` is stable, so two ingredients of the same kind keep
the order the customer gave them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from conectl.domain.catalog import Catalog


def reorder(requests: Sequence[str], catalog: Catalog) -> list[str]:
    """Return *requests* sorted by ingredient kind weight.

    Every identifier is resolved before sorting, so an unknown ingredient
    raises :class:`~conectl.domain.errors.UnknownIngredient` and nothing
    is returned.  Orders with no cone, several cones, or no extras are
    all accepted.

    Examples:
        >>> from conectl.domain.catalog import default_catalog
        >>> reorder(["Cherries", "ScoopOfChocolate", "WaffleCone"], default_catalog())
        ['WaffleCone', 'ScoopOfChocolate', 'Cherries']
    """
    weights = {ident: catalog.lookup(ident).kind.weight for ident in requests}
    return sorted(requests, key=weights.__getitem__)
