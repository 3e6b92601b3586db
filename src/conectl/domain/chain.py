"""Chain builder — stack ingredient layers on top of a customer.

A chain is a singly linked list anchored at its tip::

    tip -> topping -> ... -> scoop -> cone -> BaseNode(customer)

Each :class:`LayerNode` knows only the layer beneath it.  Links are
immutable once made, so ingredients must already be in assembly order
(see :mod:`conectl.domain.ordering`) before :func:`build` runs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from conectl.domain.errors import CompositionError, MalformedChain, UnknownIngredient

if TYPE_CHECKING:
    from conectl.domain.catalog import Catalog, IngredientSpec
    from conectl.domain.people import Customer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BaseNode:
    """Terminal node. Carries the customer and contributes no line."""

    customer: Customer


@dataclass(frozen=True)
class LayerNode:
    """One ingredient layer wrapping the node beneath it."""

    previous: ChainNode
    spec: IngredientSpec


ChainNode = BaseNode | LayerNode


def build(customer: Customer, identifiers: Sequence[str], catalog: Catalog) -> ChainNode:
    """Build a chain from already-sorted *identifiers* and return its tip.

    An empty sequence returns the bare :class:`BaseNode`.

    Raises:
        CompositionError: An identifier could not be resolved.  The
            originating :class:`UnknownIngredient` is the ``__cause__``.
    """
    tip: ChainNode = BaseNode(customer)
    for identifier in identifiers:
        try:
            spec = catalog.lookup(identifier)
        except UnknownIngredient as exc:
            raise CompositionError(
                f"Cannot add {identifier!r} to {customer.name}'s cone: {exc.message}",
                identifier=identifier,
                customer=customer.name,
            ) from exc
        tip = LayerNode(previous=tip, spec=spec)
    logger.debug("Built chain of %d layers for %s", len(identifiers), customer.name)
    return tip


def walk(tip: ChainNode) -> Iterator[ChainNode]:
    """Yield nodes from *tip* down to (and including) the base node.

    Raises:
        MalformedChain: A node is revisited or the walk runs off the end
            without reaching a :class:`BaseNode`.
    """
    seen: set[int] = set()
    node: object = tip
    while True:
        if id(node) in seen:
            raise MalformedChain("Chain contains a cycle", depth=len(seen))
        seen.add(id(node))
        if isinstance(node, BaseNode):
            yield node
            return
        if not isinstance(node, LayerNode):
            raise MalformedChain(
                f"Chain ends in {type(node).__name__} instead of a base node",
                depth=len(seen) - 1,
            )
        yield node
        node = node.previous


def chain_depth(tip: ChainNode) -> int:
    """Number of ingredient layers above the base node."""
    return sum(1 for node in walk(tip) if isinstance(node, LayerNode))
