"""A hash-map octree addressed by Morton-style 3-bit codes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

_UINT32 = 0xFFFFFFFF


@dataclass(eq=False)
class OctreeNode:
    """A node with its location code, child bitmask and optional point data."""

    code: int
    has_child: int = 0
    data: np.ndarray | None = None


@dataclass
class Octree:
    """Octree whose nodes are stored by location code.

    Each level adds three bits to a node's code; the child index selects one of
    the eight octants in z-order.
    """

    nodes: dict[int, OctreeNode] = field(default_factory=dict)

    def parent(self, node: OctreeNode) -> OctreeNode | None:
        """Return the parent of ``node``, or None if it is not stored."""
        return self.lookup(node.code >> 3)

    def lookup(self, code: int) -> OctreeNode | None:
        """Return the node stored under ``code``, or None."""
        return self.nodes.get(code)

    def depth(self, node: OctreeNode) -> int:
        """Return the depth of ``node`` in the tree (0 for the root)."""
        return (node.code & _UINT32).bit_length() // 3

    def traverse(self, node: OctreeNode) -> Iterator[OctreeNode]:
        """Yield all descendants of ``node`` depth first, children in z-order.

        Raises KeyError if a child flagged in ``has_child`` is not stored.
        """
        for i in range(8):
            if node.has_child & (1 << i):
                child_code = ((node.code << 3) | i) & _UINT32
                child = self.lookup(child_code)
                if child is None:
                    raise KeyError(f"missing child node with code {child_code}")
                yield child
                yield from self.traverse(child)