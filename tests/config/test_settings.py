"""Tests for ConeSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from conectl.config.settings import ConeSettings
from tests.conftest import write_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("CONECTL_CONFIG", "CONECTL_SHOP__NAME", "CONECTL_VERBOSE"):
        monkeypatch.delenv(var, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = ConeSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.shop.name == "The Ice Cream Shoppe"
        assert settings.menu.ingredients == []

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ConeSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        path = write_config(tmp_path, '[shop]\nname = "Scoops"\ndefault_engineer = "Julie"\n')
        settings = ConeSettings.from_cli(start=tmp_path)
        assert settings.config_path == path
        assert settings.shop.name == "Scoops"
        assert settings.shop.default_engineer == "Julie"
        assert settings.shop.closing == "So, here ya go!"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "shop.toml"
        custom.parent.mkdir()
        custom.write_text('[shop]\nname = "Custom"\n')
        settings = ConeSettings.from_cli(config_path=str(custom))
        assert settings.shop.name == "Custom"
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = ConeSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.shop.name == "The Ice Cream Shoppe"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        write_config(tmp_path, "[shop\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ConeSettings.from_cli(start=tmp_path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        write_config(
            tmp_path,
            '[[menu.ingredients]]\nid = "Spoon"\nkind = "utensil"\nmessage = "?"\n',
        )
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            ConeSettings.from_cli(start=tmp_path)

    def test_greeting_with_attribute_access_rejected(self, tmp_path: Path) -> None:
        write_config(tmp_path, '[shop]\ngreeting = "Hi {customer.__class__}"\n')
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            ConeSettings.from_cli(start=tmp_path)

    def test_catalog_includes_configured_ingredients(self, tmp_path: Path) -> None:
        write_config(
            tmp_path,
            '[[menu.ingredients]]\nid = "HotFudge"\nkind = "topping"\nmessage = "Fudge."\n',
        )
        catalog = ConeSettings.from_cli(start=tmp_path).build_catalog()
        assert catalog.frozen
        assert catalog.lookup("HotFudge").message == "Fudge."
        assert "WaffleCone" in catalog


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        write_config(tmp_path, '[shop]\nname = "FromToml"\n')
        monkeypatch.setenv("CONECTL_SHOP__NAME", "FromEnv")
        assert ConeSettings.from_cli(start=tmp_path).shop.name == "FromEnv"

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        write_config(tmp_path, "quiet = true\n")
        assert ConeSettings.from_cli(start=tmp_path, quiet=False).quiet is False
        assert ConeSettings.from_cli(start=tmp_path).quiet is True
