"""OrderService — take, preview, and demo cone orders."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog

from conectl.domain.errors import ConeError
from conectl.domain.orders import DEMO_ORDERS, ServedOrder, count_kind, process_order
from conectl.domain.ordering import reorder
from conectl.domain.people import Customer, Engineer
from conectl.domain.types import IngredientKind
from conectl.services.base import BaseService
from conectl.services.result import ServiceResult
from conectl.services.telemetry import trace_span, traced

log = structlog.get_logger(__name__)


def _order_payload(served: ServedOrder) -> dict[str, Any]:
    return {
        "customer": served.customer.name,
        "engineer": served.engineer.name if served.engineer else None,
        "ingredients": list(served.ingredients),
        "lines": list(served.lines),
    }


class OrderService(BaseService):
    """Turns customer requests into served cones."""

    @traced
    def take_order(
        self,
        customer: str,
        identifiers: Sequence[str],
        *,
        engineer: str | None = None,
    ) -> ServiceResult:
        """Reorder, build, and serve a single order.

        On failure no lines are returned; the error carries the code of
        the domain exception that stopped the order.
        """
        who = Customer(customer)
        staff = Engineer(engineer) if engineer else self._default_engineer()
        warnings: list[str] = []
        try:
            with trace_span("check_cones"):
                warnings.extend(self._cone_warnings(identifiers, who))
            with trace_span("process_order") as span:
                served = self._process(who, identifiers, staff)
                if span is not None:
                    span.annotate("layers", len(served.layer_lines))
        except ConeError as exc:
            log.warning("order.failed", customer=customer, code=exc.code, reason=exc.message)
            return ServiceResult.failure("serve_order", exc)

        log.info(
            "order.served",
            customer=customer,
            engineer=staff.name if staff else None,
            layers=len(served.layer_lines),
        )
        return ServiceResult(
            ok=True,
            op="serve_order",
            data=_order_payload(served),
            warnings=warnings,
        )

    @traced
    def preview(self, identifiers: Sequence[str]) -> ServiceResult:
        """Show the assembly order without building anything."""
        try:
            ordered = reorder(identifiers, self._catalog)
        except ConeError as exc:
            return ServiceResult.failure("reorder", exc)
        return ServiceResult(
            ok=True,
            op="reorder",
            data={
                "requested": list(identifiers),
                "ingredients": ordered,
                "kinds": [str(self._catalog.lookup(i).kind) for i in ordered],
            },
        )

    @traced
    def run_demo(self) -> ServiceResult:
        """Serve the shop's reference orders one after another.

        Each order stands alone: a failure is reported for that order and
        the next one still runs.
        """
        orders: list[dict[str, Any]] = []
        warnings: list[str] = []
        for demo in DEMO_ORDERS:
            with trace_span(f"demo:{demo.customer.name}"):
                try:
                    served = self._process(demo.customer, demo.ingredients, demo.engineer)
                except ConeError as exc:
                    warnings.append(f"{demo.customer.name}'s order failed: {exc.message}")
                    orders.append(
                        {
                            "customer": demo.customer.name,
                            "engineer": demo.engineer.name,
                            "error": exc.code,
                        }
                    )
                    continue
            orders.append(_order_payload(served))
        return ServiceResult(
            ok=True,
            op="demo",
            data={"orders": orders, "count": len(orders)},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _process(
        self,
        customer: Customer,
        identifiers: Sequence[str],
        engineer: Engineer | None,
    ) -> ServedOrder:
        return process_order(
            customer,
            identifiers,
            self._catalog,
            engineer=engineer,
            greeting=self._shop.greeting,
            closing=self._shop.closing,
            step=trace_span,
        )

    def _default_engineer(self) -> Engineer | None:
        name = self._shop.default_engineer
        return Engineer(name) if name else None

    def _cone_warnings(self, identifiers: Sequence[str], customer: Customer) -> list[str]:
        cones = count_kind(identifiers, self._catalog, IngredientKind.BASE)
        if cones == 0:
            return [f"No cone in {customer.name}'s order; serving it in a cup"]
        if cones > 1:
            return [f"{customer.name}'s order has {cones} cones; stacking them all"]
        return []
