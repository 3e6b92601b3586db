"""Order processing — reorder, build, serve, and wrap in greeting/closing.

:func:`process_order` is a pure function: each call builds a fresh chain,
serves it, and discards it.  Nothing is kept between orders, so one
engineer can never be caught halfway through two cones.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from conectl.domain.chain import build
from conectl.domain.ordering import reorder
from conectl.domain.people import Customer, Engineer
from conectl.domain.serving import serve
from conectl.domain.types import IngredientKind

if TYPE_CHECKING:
    from conectl.domain.catalog import Catalog

DEFAULT_GREETING = "Hi {customer}! I've got this marvelous ice cream cone for you!"
DEFAULT_CLOSING = "So, here ya go!"

StepContext = Callable[[str], AbstractContextManager[Any]]


def _no_step(name: str) -> AbstractContextManager[Any]:
    return nullcontext()


@dataclass(frozen=True)
class ServedOrder:
    """A completed order.

    Attributes:
        customer: Who the cone is for.
        engineer: Who built it, if known.
        ingredients: Identifiers in assembly order.
        lines: Greeting, one line per layer, closing.
    """

    customer: Customer
    engineer: Engineer | None
    ingredients: tuple[str, ...]
    lines: tuple[str, ...]

    @property
    def layer_lines(self) -> tuple[str, ...]:
        """Only the per-layer lines (no greeting or closing)."""
        return self.lines[1:-1]


def render_template(template: str, customer: Customer, engineer: Engineer | None) -> str:
    """Fill a greeting/closing template with ``{customer}`` and ``{engineer}``."""
    return template.format(
        customer=customer.name,
        engineer=engineer.name if engineer else "",
    )


def process_order(
    customer: Customer,
    identifiers: Sequence[str],
    catalog: Catalog,
    *,
    engineer: Engineer | None = None,
    greeting: str = DEFAULT_GREETING,
    closing: str = DEFAULT_CLOSING,
    step: StepContext = _no_step,
) -> ServedOrder:
    """Assemble and serve one order.

    Either every line is produced or an exception is raised; a failed
    order never yields a partial narration.

    *step* is entered around each stage ("reorder", "build", "serve"),
    letting callers time them without the domain knowing how.

    Raises:
        UnknownIngredient: An identifier is not on the menu.
        MalformedChain: Serving found a broken chain.
    """
    with step("reorder"):
        ordered = reorder(identifiers, catalog)
    with step("build"):
        tip = build(customer, ordered, catalog)
    with step("serve"):
        layers = serve(tip)
    lines = (
        render_template(greeting, customer, engineer),
        *layers,
        render_template(closing, customer, engineer),
    )
    return ServedOrder(
        customer=customer,
        engineer=engineer,
        ingredients=tuple(ordered),
        lines=lines,
    )


def count_kind(identifiers: Sequence[str], catalog: Catalog, kind: IngredientKind) -> int:
    """How many of *identifiers* resolve to *kind*."""
    return sum(1 for ident in identifiers if catalog.lookup(ident).kind == kind)


# ---------------------------------------------------------------------------
# Reference orders
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DemoOrder:
    engineer: Engineer
    customer: Customer
    ingredients: tuple[str, ...]


DEMO_ORDERS: tuple[DemoOrder, ...] = (
    DemoOrder(
        engineer=Engineer("Julie"),
        customer=Customer("Sam"),
        ingredients=("Cherries", "ScoopOfChocolate", "WaffleCone", "CandySprinkles"),
    ),
    DemoOrder(
        engineer=Engineer("Ralph"),
        customer=Customer("Martha"),
        ingredients=("ScoopOfChocolate", "ScoopOfTuna", "SugarCone", "MandMs"),
    ),
)
