from algokit.parent_bst import ParentNode, find_inorder_successor


def _build():
    nodes = {key: ParentNode(key) for key in (1, 2, 3, 5, 9, 12, 19, 21, 25)}
    nodes[5].set_left(nodes[2])
    nodes[5].set_right(nodes[12])
    nodes[2].set_left(nodes[1])
    nodes[2].set_right(nodes[3])
    nodes[12].set_left(nodes[9])
    nodes[12].set_right(nodes[21])
    nodes[21].set_left(nodes[19])
    nodes[21].set_right(nodes[25])
    return nodes


def test_set_children_links_parent():
    parent = ParentNode(5)
    left = ParentNode(2)
    right = ParentNode(8)
    parent.set_left(left)
    parent.set_right(right)
    assert parent.left is left and parent.right is right
    assert left.parent is parent and right.parent is parent


def test_successors_follow_sorted_order():
    nodes = _build()
    ordered = sorted(nodes)
    for current, following in zip(ordered, ordered[1:]):
        assert find_inorder_successor(nodes[current]) is nodes[following]


def test_largest_has_no_successor():
    nodes = _build()
    assert find_inorder_successor(nodes[max(nodes)]) is None


def test_none_target():
    assert find_inorder_successor(None) is None


def test_single_node():
    assert find_inorder_successor(ParentNode(7)) is None