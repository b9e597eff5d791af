import random

import pytest

from algokit.bst import (
    Node,
    create_bst,
    find_closest,
    find_closest_iterative,
    find_distance,
    flatten,
    flatten_optimized,
    inorder,
    inorder_successor,
    insert,
    is_bst,
    iter_flattened,
    lca,
    levels,
    min_height_bst,
    search,
    shortest_distance,
)


def test_source_case_inorder_insert_search():
    root = create_bst([7, 6, 1, 10, 12, 11, 8, 2, 9])
    assert inorder(root) == [1, 2, 6, 7, 8, 9, 10, 11, 12]
    root = insert(root, 5)
    assert inorder(root) == [1, 2, 5, 6, 7, 8, 9, 10, 11, 12]
    root = insert(root, 18)
    root = insert(root, 15)
    assert inorder(root) == [1, 2, 5, 6, 7, 8, 9, 10, 11, 12, 15, 18]
    assert search(root, 3) is False
    assert search(root, 12) is True


def test_insert_into_empty():
    root = insert(None, 4)
    assert root.data == 4
    assert inorder(root) == [4]


def test_duplicates_go_left():
    root = create_bst([5, 5])
    assert root.left is not None and root.left.data == 5
    assert root.right is None


def test_inorder_sorted_random():
    rng = random.Random(3)
    values = [rng.randint(-50, 50) for _ in range(60)]
    root = create_bst(values)
    assert inorder(root) == sorted(values)
    assert is_bst(root)


def test_levels():
    root = create_bst([4, 2, 6, 1, 3, 5, 7])
    assert levels(root) == [[4], [2, 6], [1, 3, 5, 7]]
    assert levels(None) == []


def test_find_closest():
    root = create_bst([8, 3, 10, 1, 6, 14, 4, 7, 13])
    assert find_closest(root, 16) == (14, 2)
    assert find_closest(root, 12) == (13, 1)
    assert find_closest(root, 6) == (6, 0)


def test_find_closest_iterative_agrees():
    root = create_bst([8, 3, 10, 1, 6, 14, 4, 7, 13])
    assert find_closest_iterative(root, 16) == 14
    assert find_closest_iterative(root, 12) == 13
    for target in range(-5, 20):
        assert find_closest_iterative(root, target) == find_closest(root, target)[0]


def test_find_closest_empty():
    with pytest.raises(ValueError):
        find_closest(None, 3)
    with pytest.raises(ValueError):
        find_closest_iterative(None, 3)


def test_flatten():
    values = [4, 2, 6, 1, 3, 5, 7]
    head = flatten(create_bst(values))
    assert list(iter_flattened(head)) == sorted(values)


def test_flatten_optimized():
    values = [4, 2, 6, 1, 3, 5, 7]
    head, tail = flatten_optimized(create_bst(values))
    assert list(iter_flattened(head)) == sorted(values)
    assert tail.data == max(values)
    assert flatten_optimized(None) == (None, None)


def test_flatten_random_with_duplicates():
    rng = random.Random(7)
    values = [rng.randint(0, 20) for _ in range(40)]
    assert list(iter_flattened(flatten(create_bst(values)))) == sorted(values)
    head, _ = flatten_optimized(create_bst(values))
    assert list(iter_flattened(head)) == sorted(values)


def test_inorder_successor():
    values = [4, 2, 6, 1, 3, 5, 7, 15, 10, 9, 8]
    root = create_bst(values)
    ordered = sorted(values)
    for current, following in zip(ordered, ordered[1:]):
        assert inorder_successor(root, current).data == following
    assert inorder_successor(root, 15) is None
    assert inorder_successor(root, 100) is None


def test_min_height_bst():
    root = min_height_bst([4, 2, 6, 1, 3, 5, 7])
    assert levels(root) == [[4], [2, 6], [1, 3, 5, 7]]
    assert min_height_bst([]) is None


@pytest.mark.parametrize("n", range(1, 21))
def test_min_height_bst_height(n):
    root = min_height_bst(range(n, 0, -1))
    assert len(levels(root)) == n.bit_length()
    assert inorder(root) == list(range(1, n + 1))
    assert is_bst(root)


def test_is_bst_examples():
    root = Node(4, Node(2, Node(1), Node(3)), Node(5))
    assert is_bst(root) is True
    root.left.right.right = Node(10)
    assert is_bst(root) is False
    not_bst = Node(1, Node(2, Node(4), Node(5)), Node(3))
    assert is_bst(not_bst) is False
    assert is_bst(None) is True


def test_lca():
    root = create_bst([5, 2, 12, -4, 3, 9, 21, 19, 25])
    assert lca(root, 9, 25).data == 12
    assert lca(root, 9, 3).data == 5
    assert lca(root, 9, 12).data == 12
    assert lca(None, 1, 2) is None


def test_shortest_distance():
    root = create_bst([10, 4, 15, 2, 5, 13, 22, 1, 14])
    assert shortest_distance(root, 1, 4) == 2
    assert shortest_distance(root, 2, 13) == 4
    assert shortest_distance(root, 5, 14) == 5
    assert shortest_distance(root, 5, 5) == 0


def test_find_distance():
    root = create_bst([10, 4, 15, 2, 5, 13, 22, 1, 14])
    assert find_distance(root, 10) == 0
    assert find_distance(root, 14) == 3