"""Domain exceptions.

Every exception carries a stable ``code`` which the service layer copies
into ``ServiceError.code``.
"""

from __future__ import annotations

from typing import Any


class ConeError(Exception):
    """Base class for all order-assembly failures."""

    code = "CONE_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class UnknownIngredient(ConeError):
    """An identifier has no catalog entry."""

    code = "UNKNOWN_INGREDIENT"

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Unknown ingredient: {identifier!r}", identifier=identifier)
        self.identifier = identifier


class DuplicateIngredient(ConeError):
    """An identifier was registered twice."""

    code = "DUPLICATE_INGREDIENT"

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Ingredient already registered: {identifier!r}", identifier=identifier)
        self.identifier = identifier


class CatalogFrozen(ConeError):
    """Registration was attempted after the catalog was frozen."""

    code = "CATALOG_FROZEN"

    def __init__(self, identifier: str) -> None:
        super().__init__(
            f"Catalog is read-only; cannot register {identifier!r}",
            identifier=identifier,
        )
        self.identifier = identifier


class CompositionError(ConeError):
    """Chain construction failed (always caused by a failed lookup)."""

    code = "COMPOSITION_ERROR"


class MalformedChain(ConeError):
    """A chain has a cycle or does not end in a base node."""

    code = "MALFORMED_CHAIN"
