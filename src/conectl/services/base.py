"""BaseService — shared foundation for conectl services.

Every service receives the frozen :class:`Catalog` at construction time
and, optionally, the ``[shop]`` settings that shape its wording.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from conectl.config.models import ShopConfig

if TYPE_CHECKING:
    from conectl.domain.catalog import Catalog


class BaseService:
    """Base for service-layer classes.

    Usage::

        class OrderService(BaseService):
            def take_order(self, customer: str, ...) -> ServiceResult:
                served = process_order(..., self._catalog)
                ...
    """

    def __init__(self, catalog: Catalog, shop: ShopConfig | None = None) -> None:
        self._catalog = catalog
        self._shop = shop or ShopConfig()
