"""Tests for serving (unwinding) a chain."""

from __future__ import annotations

import pytest

from conectl.domain.catalog import Catalog
from conectl.domain.chain import BaseNode, LayerNode, build
from conectl.domain.errors import MalformedChain
from conectl.domain.people import Customer
from conectl.domain.serving import serve
from tests.conftest import MARTHA_SORTED, SAM_SORTED, messages

SAM = Customer("Sam")


class TestServe:
    def test_base_only_emits_nothing(self) -> None:
        assert serve(BaseNode(SAM)) == []

    def test_lines_in_build_order(self, catalog: Catalog) -> None:
        tip = build(SAM, SAM_SORTED, catalog)
        assert serve(tip) == messages(catalog, SAM_SORTED)

    def test_martha_lines(self, catalog: Catalog) -> None:
        tip = build(Customer("Martha"), MARTHA_SORTED, catalog)
        assert serve(tip) == messages(catalog, MARTHA_SORTED)

    def test_cone_and_scoop_only(self, catalog: Catalog) -> None:
        tip = build(SAM, ["SugarCone", "ScoopOfVanilla"], catalog)
        assert len(serve(tip)) == 2

    def test_long_chain_does_not_recurse(self, catalog: Catalog) -> None:
        tip = build(SAM, ["WaffleCone"] + ["Cherries"] * 5000, catalog)
        lines = serve(tip)
        assert len(lines) == 5001
        assert lines[0] == catalog.lookup("WaffleCone").message


class TestMalformed:
    def test_self_cycle(self, catalog: Catalog) -> None:
        node = LayerNode(previous=BaseNode(SAM), spec=catalog.lookup("MandMs"))
        object.__setattr__(node, "previous", node)
        with pytest.raises(MalformedChain, match="cycle"):
            serve(node)

    def test_two_node_cycle(self, catalog: Catalog) -> None:
        lower = LayerNode(previous=BaseNode(SAM), spec=catalog.lookup("WaffleCone"))
        upper = LayerNode(previous=lower, spec=catalog.lookup("Cherries"))
        object.__setattr__(lower, "previous", upper)
        with pytest.raises(MalformedChain):
            serve(upper)

    def test_missing_terminus(self, catalog: Catalog) -> None:
        node = LayerNode(previous="Sam", spec=catalog.lookup("MandMs"))  # type: ignore[arg-type]
        with pytest.raises(MalformedChain) as excinfo:
            serve(node)
        assert excinfo.value.code == "MALFORMED_CHAIN"
