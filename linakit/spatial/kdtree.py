"""A k-d tree over points of equal dimension."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from linakit.vector import Vector

_MAX_VALUE = sys.float_info.max


def _same_point(p: Sequence[float], q: Sequence[float]) -> bool:
    return len(p) == len(q) and all(a == b for a, b in zip(p, q))


@dataclass(eq=False)
class Node:
    """A tree node holding one point and its two subtrees."""

    point: Sequence[float]
    left: Node | None = None
    right: Node | None = None

    def insert(self, point: Sequence[float]) -> Node:
        """Insert ``point`` below this node, treating it as depth 0, and return this node."""
        return _insert(self, point, 0)

    def __str__(self) -> str:
        return f"Node->point: {Vector(self.point)}"


def _insert(node: Node | None, point: Sequence[float], depth: int) -> Node:
    if node is None:
        return Node(point)
    dim = depth % len(point)
    if point[dim] < node.point[dim]:
        node.left = _insert(node.left, point, depth + 1)
    else:
        node.right = _insert(node.right, point, depth + 1)
    return node


def _min_value(node: Node | None, dim: int, depth: int) -> float:
    if node is None:
        return _MAX_VALUE
    value = node.point[dim]
    if depth % len(node.point) == dim:
        if node.left is None:
            return value
        return min(value, _min_value(node.left, dim, depth + 1))
    return min(
        value,
        _min_value(node.left, dim, depth + 1),
        _min_value(node.right, dim, depth + 1),
    )


def _min_node(node: Node | None, dim: int, depth: int) -> Node | None:
    if node is None:
        return None
    if depth % len(node.point) == dim:
        if node.left is None:
            return node
        return _min_node(node.left, dim, depth + 1)
    best = node
    for candidate in (
        _min_node(node.left, dim, depth + 1),
        _min_node(node.right, dim, depth + 1),
    ):
        if candidate is not None and candidate.point[dim] < best.point[dim]:
            best = candidate
    return best


def _delete(node: Node | None, point: Sequence[float], depth: int) -> Node | None:
    if node is None:
        return None
    dim = depth % len(point)
    if _same_point(node.point, point):
        if node.right is not None:
            replacement = _min_node(node.right, dim, depth + 1)
            node.point = replacement.point
            node.right = _delete(node.right, replacement.point, depth + 1)
        elif node.left is not None:
            replacement = _min_node(node.left, dim, depth + 1)
            node.point = replacement.point
            node.right = _delete(node.left, replacement.point, depth + 1)
            node.left = None
        else:
            return None
        return node
    if point[dim] < node.point[dim]:
        node.left = _delete(node.left, point, depth + 1)
    else:
        node.right = _delete(node.right, point, depth + 1)
    return node


def _pre_order(node: Node | None, depth: int) -> str:
    if node is None:
        return "<nil>\n"
    return (
        f"depth: {depth} root: {node}"
        + "Left: "
        + _pre_order(node.left, depth + 1)
        + "Right: "
        + _pre_order(node.right, depth + 1)
    )


@dataclass
class KDTree:
    """A k-d tree; the splitting dimension cycles with depth."""

    root: Node | None = None
    count: int = 0

    def insert(self, point: Sequence[float]) -> bool:
        """Insert ``point`` and return True."""
        if self.root is None:
            self.root = Node(point)
        else:
            self.root.insert(point)
        self.count += 1
        return True

    def search(self, point: Sequence[float]) -> Node | None:
        """Return the node whose point equals ``point``, or None if there is none."""
        node, depth = self.root, 0
        while node is not None:
            if _same_point(node.point, point):
                return node
            dim = depth % len(point)
            node = node.left if point[dim] < node.point[dim] else node.right
            depth += 1
        return None

    def find_min_value(self, dim: int) -> float:
        """Return the smallest coordinate along ``dim``; the largest float if the tree is empty."""
        return _min_value(self.root, dim, 0)

    def find_min_node(self, dim: int) -> Node | None:
        """Return the node with the smallest coordinate along ``dim``, or None if empty."""
        return _min_node(self.root, dim, 0)

    def delete(self, point: Sequence[float]) -> bool:
        """Remove one node equal to ``point``; return whether a node was removed."""
        if self.search(point) is None:
            return False
        self.root = _delete(self.root, point, 0)
        self.count -= 1
        return True

    def __str__(self) -> str:
        if self.root is None:
            return "<nil>"
        return _pre_order(self.root, 0)