import pytest

from linakit.spatial.octree import Octree, OctreeNode


def test_depth():
    node = OctreeNode(code=127, has_child=3)
    tree = Octree({node.code: node})
    assert tree.depth(node) == 2


def test_depth_of_root():
    root = OctreeNode(code=0)
    assert Octree({0: root}).depth(root) == 0


def test_parent():
    parent = OctreeNode(code=15, has_child=7)
    node = OctreeNode(code=127, has_child=3)
    tree = Octree({parent.code: parent, node.code: node})
    assert tree.parent(node) is parent


def test_parent_missing():
    node = OctreeNode(code=127, has_child=3)
    assert Octree({node.code: node}).parent(node) is None


def test_lookup():
    node = OctreeNode(code=127, has_child=3)
    tree = Octree({node.code: node})
    assert tree.lookup(127) is node
    assert tree.lookup(5) is None


def test_traverse_z_order():
    root = OctreeNode(code=1, has_child=0b101)
    a = OctreeNode(code=8)
    b = OctreeNode(code=10, has_child=0b10)
    c = OctreeNode(code=81)
    tree = Octree({n.code: n for n in (root, a, b, c)})
    assert [n.code for n in tree.traverse(root)] == [8, 10, 81]


def test_traverse_missing_child():
    root = OctreeNode(code=1, has_child=0b1)
    tree = Octree({1: root})
    with pytest.raises(KeyError):
        list(tree.traverse(root))