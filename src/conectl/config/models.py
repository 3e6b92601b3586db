"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``conectl.toml`` only holds
overrides.  A shop that sells the stock menu needs no config file.
"""

from __future__ import annotations

import string

from pydantic import BaseModel, Field, field_validator

from conectl.domain.catalog import IngredientSpec
from conectl.domain.orders import DEFAULT_CLOSING, DEFAULT_GREETING
from conectl.domain.types import IngredientKind

_TEMPLATE_FIELDS = {"customer": "Sam", "engineer": "Julie"}
_FORMATTER = string.Formatter()


class ShopConfig(BaseModel):
    """[shop] section."""

    model_config = {"frozen": True}

    name: str = "The Ice Cream Shoppe"
    greeting: str = DEFAULT_GREETING
    closing: str = DEFAULT_CLOSING
    default_engineer: str | None = None

    @field_validator("greeting", "closing")
    @classmethod
    def _known_placeholders(cls, value: str) -> str:
        try:
            parsed = list(_FORMATTER.parse(value))
        except ValueError as exc:
            raise ValueError(f"malformed template: {exc}") from exc
        for _, name, spec, _ in parsed:
            if name is None:
                continue
            # bare names only; "customer.x" and "customer[0]" fail here too
            if name not in _TEMPLATE_FIELDS:
                msg = f"template may only use {{customer}} and {{engineer}}, got {{{name}}}"
                raise ValueError(msg)
            if spec and "{" in spec:
                raise ValueError(f"nested field in format spec of {{{name}}}")
        try:
            value.format(**_TEMPLATE_FIELDS)
        except ValueError as exc:
            raise ValueError(f"malformed template: {exc}") from exc
        return value


class IngredientEntry(BaseModel):
    """One ``[[menu.ingredients]]`` table."""

    model_config = {"frozen": True}

    id: str = Field(min_length=1)
    kind: IngredientKind
    message: str

    def to_spec(self) -> IngredientSpec:
        return IngredientSpec(identifier=self.id, kind=self.kind, message=self.message)


class MenuConfig(BaseModel):
    """[menu] section. Entries are registered on top of the stock menu."""

    model_config = {"frozen": True}

    ingredients: list[IngredientEntry] = Field(default_factory=list)

    def specs(self) -> list[IngredientSpec]:
        return [entry.to_spec() for entry in self.ingredients]

