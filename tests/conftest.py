"""Shared pytest fixtures and test helpers for conectl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from conectl.domain.catalog import Catalog, default_catalog
from conectl.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by AppContext."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    cone_level = logging.getLogger("conectl").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("conectl").setLevel(cone_level)
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def catalog() -> Catalog:
    """Frozen stock-menu catalog."""
    return default_catalog()


@pytest.fixture
def shop_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory with no config discovery leaking in.

    Use via ``@pytest.mark.usefixtures("shop_dir")`` on command test
    classes that should run against the stock menu.
    """
    monkeypatch.delenv("CONECTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------

SAM_ORDER = ["Cherries", "ScoopOfChocolate", "WaffleCone", "CandySprinkles"]
SAM_SORTED = ["WaffleCone", "ScoopOfChocolate", "Cherries", "CandySprinkles"]

MARTHA_ORDER = ["ScoopOfChocolate", "ScoopOfTuna", "SugarCone", "MandMs"]
MARTHA_SORTED = ["SugarCone", "ScoopOfChocolate", "ScoopOfTuna", "MandMs"]


def messages(catalog: Catalog, identifiers: list[str]) -> list[str]:
    """The served line for each identifier, in the given order."""
    return [catalog.lookup(i).message for i in identifiers]


def write_config(directory: Path, body: str) -> Path:
    """Write ``conectl.toml`` into *directory* and return its path."""
    path = directory / "conectl.toml"
    path.write_text(body, encoding="utf-8")
    return path
