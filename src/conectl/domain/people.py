"""Customer and engineer value holders."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """The person an order is for. Anchors the base of every chain."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Engineer:
    """The shop employee assembling an order."""

    name: str

    def __str__(self) -> str:
        return self.name
