"""Server — unwind a chain from the cone up and narrate each layer.

Serving descends from the tip to the base, stacking every layer, then
pops the stack so lines come out in assembly order: cone first, scoops
next, extras last.  The walk is iterative, so long chains cannot exhaust
the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from conectl.domain.chain import LayerNode, walk

if TYPE_CHECKING:
    from conectl.domain.chain import ChainNode


def serve(tip: ChainNode) -> list[str]:
    """Return one line per layer of *tip*, base to tip.

    The whole chain is validated before any line is produced.

    Raises:
        MalformedChain: The chain has a cycle or no base node.
    """
    stack = [node for node in walk(tip) if isinstance(node, LayerNode)]
    lines: list[str] = []
    while stack:
        lines.append(stack.pop().spec.message)
    return lines
