import pytest

from dsakit.bst import BinarySearchTree

KEYS = [50, 30, 70, 20, 40, 60, 80, 35, 45, 65]


@pytest.fixture
def tree():
    result = BinarySearchTree()
    for key in KEYS:
        result.insert(key)
    return result


def test_inorder_is_sorted(tree):
    assert list(tree) == sorted(KEYS)
    assert len(tree) == len(KEYS)


def test_contains(tree):
    assert all(key in tree for key in KEYS)
    assert 51 not in tree


def test_minimum_and_maximum(tree):
    assert tree.minimum() == min(KEYS)
    assert tree.maximum() == max(KEYS)


def test_empty_tree_extremes():
    tree = BinarySearchTree()
    with pytest.raises(ValueError):
        tree.minimum()
    with pytest.raises(ValueError):
        tree.maximum()
    assert list(tree) == []


@pytest.mark.parametrize("key", KEYS)
def test_successor_and_predecessor_follow_order(tree, key):
    ordered = sorted(KEYS)
    position = ordered.index(key)
    expected_next = ordered[position + 1] if position + 1 < len(ordered) else None
    expected_prev = ordered[position - 1] if position > 0 else None
    assert tree.successor(key) == expected_next
    assert tree.predecessor(key) == expected_prev


def test_successor_of_missing_key(tree):
    with pytest.raises(KeyError):
        tree.successor(999)
    with pytest.raises(KeyError):
        tree.predecessor(999)


@pytest.mark.parametrize("key", [20, 60, 30, 50, 70])
def test_delete_keeps_order(tree, key):
    assert tree.delete(key) is True
    remaining = sorted(KEYS)
    remaining.remove(key)
    assert list(tree) == remaining
    assert key not in tree
    assert len(tree) == len(remaining)


def test_delete_missing_is_noop(tree):
    assert tree.delete(999) is False
    assert list(tree) == sorted(KEYS)


def test_delete_everything(tree):
    for key in KEYS:
        assert tree.delete(key)
    assert list(tree) == []
    assert len(tree) == 0


def test_delete_only_root():
    tree = BinarySearchTree()
    tree.insert(5)
    tree.delete(5)
    assert 5 not in tree
    tree.insert(7)
    assert list(tree) == [7]


def test_duplicates_kept():
    tree = BinarySearchTree()
    for key in [3, 1, 3, 2, 3]:
        tree.insert(key)
    assert list(tree) == [1, 2, 3, 3, 3]
    tree.delete(3)
    assert list(tree) == [1, 2, 3, 3]